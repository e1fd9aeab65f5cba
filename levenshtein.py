"""Weighted minimum edit distance over a dynamic-programming cost matrix."""


import logging


from enum import Enum
from typing import List, NamedTuple, Optional, Sequence


INS_COST = 1
DEL_COST = 1
SUB_COST = 2


class Op(Enum):
    DEL = 1
    INS = 2
    SUB = 3
    MATCH = 4


Cost = int
Matrix = List[List[Cost]]
Script = List[Op]


class Costs(NamedTuple):
    insertion: Cost = INS_COST
    deletion: Cost = DEL_COST
    substitution: Cost = SUB_COST


class DistanceMatrix:
    """Cost table for transforming source into target.

    Rows are indexed by prefixes of target, columns by prefixes of source, so
    cells[i][j] is the cheapest way to turn source[:j] into target[:i].
    """

    def __init__(self, source: Sequence[str], target: Sequence[str]) -> None:
        self.source = tuple(source)
        self.target = tuple(target)
        self.costs: Optional[Costs] = None
        self.cells: Matrix = [
            [0 for j in range(len(self.source) + 1)]
            for i in range(len(self.target) + 1)
        ]

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0])

    def compute(self, costs: Costs=Costs()) -> Cost:
        """Fills the table in place and returns the bottom-right cell.

        Both base cases are charged the insertion cost, deletion_cost only
        enters through the inner cells.
        """
        logging.debug('Computing %r -> %r with %s', ''.join(self.source),
                ''.join(self.target), costs)
        cells = self.cells
        for j in range(1, self.width):
            cells[0][j] = cells[0][j - 1] + costs.insertion
        for i in range(1, self.height):
            cells[i][0] = cells[i - 1][0] + costs.insertion
        for i in range(1, self.height):
            for j in range(1, self.width):
                if self.source[j - 1] == self.target[i - 1]:
                    cells[i][j] = cells[i - 1][j - 1]
                    continue
                ins_cost = cells[i - 1][j] + costs.insertion
                del_cost = cells[i][j - 1] + costs.deletion
                sub_cost = cells[i - 1][j - 1] + costs.substitution
                cells[i][j] = min((ins_cost, del_cost, sub_cost))
        self.costs = costs
        logging.debug('Distance: %s', cells[-1][-1])
        return cells[-1][-1]

    def script(self) -> Script:
        """Traces the filled table back into a sequence of edit operations.

        Ties are broken in the order MATCH, SUB, INS, DEL.
        """
        if self.costs is None:
            raise ValueError('matrix has not been computed')
        cells = self.cells
        i = self.height - 1
        j = self.width - 1
        script: Script = []
        while i > 0 or j > 0:
            if i == 0:
                j -= 1
                script.append(Op.DEL)
            elif j == 0:
                i -= 1
                script.append(Op.INS)
            elif self.source[j - 1] == self.target[i - 1]:
                i -= 1
                j -= 1
                script.append(Op.MATCH)
            elif cells[i - 1][j - 1] + self.costs.substitution == cells[i][j]:
                i -= 1
                j -= 1
                script.append(Op.SUB)
            elif cells[i - 1][j] + self.costs.insertion == cells[i][j]:
                i -= 1
                script.append(Op.INS)
            else:
                j -= 1
                script.append(Op.DEL)
        script.reverse()
        return script

    def render(self) -> str:
        lines = ['  #' + ''.join(f' {c}' for c in self.source)]
        lines.append('# ' + ''.join(f'{x} ' for x in self.cells[0]))
        for char, row in zip(self.target, self.cells[1:]):
            lines.append(f'{char} ' + ''.join(f'{x} ' for x in row))
        return '\n'.join(lines)

    def __str__(self) -> str:
        return self.render()


def create(source: Sequence[str], target: Sequence[str]) -> DistanceMatrix:
    return DistanceMatrix(source, target)


def distance(source: Sequence[str], target: Sequence[str], costs: Costs=Costs()) -> Cost:
    return create(source, target).compute(costs)
