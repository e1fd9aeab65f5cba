#!/usr/bin/env python3


"""Calculates the minimum edit distance from one word to another."""


import argparse
import levenshtein
import logging
import sys


from typing import List, Optional


MAX_COST = 255


def cost(value: str) -> levenshtein.Cost:
    try:
        result = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f'invalid cost: {value!r}')
    if not 0 <= result <= MAX_COST:
        raise argparse.ArgumentTypeError(
                f'cost must be between 0 and {MAX_COST}, got {result}')
    return result


def parse_args(argv: Optional[List[str]]=None) -> argparse.Namespace:
    arg_parser = argparse.ArgumentParser(prog='med', description=__doc__)
    arg_parser.add_argument('-f', '--from', dest='source', required=True,
            help='source word')
    arg_parser.add_argument('-t', '--to', dest='target', required=True,
            help='target word')
    arg_parser.add_argument('-m', '--matrix', action='store_true',
            help='print the distance matrix')
    arg_parser.add_argument('-e', '--script', action='store_true',
            help='print the edit script')
    arg_parser.add_argument('-i', '--insertion-cost', type=cost,
            default=levenshtein.INS_COST, help='insertion cost')
    arg_parser.add_argument('-d', '--deletion-cost', type=cost,
            default=levenshtein.DEL_COST, help='deletion cost')
    arg_parser.add_argument('-s', '--substitution-cost', type=cost,
            default=levenshtein.SUB_COST, help='substitution cost')
    arg_parser.add_argument('-v', '--verbose', action='count', default=0,
            help='Verbosity. Give once for inputs, twice for debugging.')
    arg_parser.add_argument('--version', action='version',
            version='%(prog)s 1.0')
    return arg_parser.parse_args(argv)


def main(argv: Optional[List[str]]=None) -> int:
    args = parse_args(argv)
    if args.verbose == 1:
        logging.basicConfig(level=logging.INFO)
    elif args.verbose >= 2:
        logging.basicConfig(level=logging.DEBUG)
    costs = levenshtein.Costs(
        insertion=args.insertion_cost,
        deletion=args.deletion_cost,
        substitution=args.substitution_cost,
    )
    logging.info('From: %s', args.source)
    logging.info('To: %s', args.target)
    matrix = levenshtein.create(args.source, args.target)
    distance = matrix.compute(costs)
    print(f'distance: {distance}')
    if args.script:
        print('script: ' + ' '.join(op.name.lower() for op in matrix.script()))
    if args.matrix:
        print()
        print('matrix:')
        print(matrix)
    return 0


if __name__ == '__main__':
    sys.exit(main())
