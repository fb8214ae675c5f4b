import enum
import functools
from collections import namedtuple


DEFAULT_BOARD_SIZE = 5


class Position(enum.Enum):
    Empty = 0
    Black = 1
    White = 2
    OffBoard = 3

    @property
    def char(self):
        if self == Position.Empty:
            return b' '
        if self == Position.Black:
            return b'b'
        if self == Position.White:
            return b'w'
        raise ValueError(f'{repr(self)} has no state character')

    @property
    def symbol(self):
        if self == Position.Empty:
            return '+'
        if self == Position.Black:
            return '@'
        if self == Position.White:
            return 'O'
        raise ValueError(f'{repr(self)} has no display symbol')

    @property
    def other(self):
        if self == Position.Black:
            return Position.White
        if self == Position.White:
            return Position.Black
        return self

    @property
    def is_player(self):
        return self in (Position.Black, Position.White)

    @classmethod
    def from_char(cls, char):
        if type(char) is str:
            char = char.encode('utf8')
        if char == b' ':
            return cls.Empty
        if char == b'b':
            return cls.Black
        if char == b'w':
            return cls.White
        raise ValueError(f'Unknown Position value: {repr(char)}')


Pos = Position


def enemy(player):
    return player.other


class IllegalMoveError(ValueError):
    pass


@functools.lru_cache(maxsize=1000)
def neighbors(point):
    # left, up, right, down
    return (point.left, point.up, point.right, point.down)


class Point(namedtuple('Point', 'row col')):
    @property
    def up(self):
        return Point(self.row - 1, self.col)

    @property
    def down(self):
        return Point(self.row + 1, self.col)

    @property
    def left(self):
        return Point(self.row, self.col - 1)

    @property
    def right(self):
        return Point(self.row, self.col + 1)

    @property
    def neighbors(self):
        return neighbors(self)


P = Point


def surrounding_points(point):
    return neighbors(Board.ensure_point(point))


def is_point(value):
    """True for a pair of ints, which is all a ``Point`` may hold."""
    try:
        if len(value) != 2:
            return False
    except TypeError:
        return False
    return all(type(v) is int for v in value)


class Board:
    """An immutable square grid of ``Position`` values.

    Every operation that looks like a mutation returns a new ``Board``. Rows
    are tuples; rewriting one cell rebuilds only the row it lives in.
    """

    def __init__(self, size=DEFAULT_BOARD_SIZE, rows=None):
        self.size = size
        if rows is None:
            row = tuple(Pos.Empty for _ in range(size))
            rows = tuple(row for _ in range(size))
        else:
            rows = tuple(tuple(r) for r in rows)
            if len(rows) != size or any(len(r) != size for r in rows):
                raise ValueError(f'Expected {size} rows of {size} positions')
            for row in rows:
                for pos in row:
                    if type(pos) is not Position or pos == Pos.OffBoard:
                        raise ValueError(f'Expected a board Position value, but got {pos}')
        self.rows = rows

    @classmethod
    def from_state_string(cls, s, size=DEFAULT_BOARD_SIZE):
        if len(s) != size**2:
            raise ValueError(
                f'Expected board of size {size} x {size} (= {size**2}), '
                f'but got string of length {len(s)}')
        rows = tuple(tuple(Pos.from_char(c) for c in s[r * size:(r + 1) * size])
                     for r in range(size))
        return cls(size, rows)

    @classmethod
    def from_rows(cls, rows):
        """Build a board from strings such as ``'.b+w'`` or ``'+@O'``."""
        chars = {'.': Pos.Empty, '+': Pos.Empty,
                 'b': Pos.Black, '@': Pos.Black,
                 'w': Pos.White, 'O': Pos.White}
        try:
            cells = tuple(tuple(chars[c] for c in row) for row in rows)
        except KeyError as e:
            raise ValueError(f'Unknown board character: {e.args[0]!r}') from None
        return cls(len(rows), cells)

    @staticmethod
    def ensure_point(o):
        if type(o) is not Point:
            return Point(*o)
        return o

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.rows == other.rows

    def __hash__(self):
        return hash((self.size, self.rows))

    def __repr__(self):
        return f'Board.from_state_string({self.state_string!r}, {self.size})'

    def on_board(self, point):
        r, c = point
        return 0 <= r < self.size and 0 <= c < self.size

    def off_board(self, point):
        return not self.on_board(point)

    def __getitem__(self, point):
        point = self.ensure_point(point)
        if not self.on_board(point):
            raise ValueError(f'Board is {self.size} x {self.size}: {repr(point)} is an invalid coordinate')
        return self.rows[point.row][point.col]

    def value_at(self, point):
        if not self.on_board(point):
            return Pos.OffBoard
        return self[point]

    def with_value_at(self, point, pos):
        point = self.ensure_point(point)
        if type(pos) is not Position or pos == Pos.OffBoard:
            raise ValueError(f'Expected a board Position value, but got {pos}')
        if not self.on_board(point):
            raise ValueError(f'Board is {self.size} x {self.size}: {repr(point)} is an invalid coordinate')
        r, c = point
        row = self.rows[r]
        new_row = row[:c] + (pos,) + row[c + 1:]
        return Board(self.size, self.rows[:r] + (new_row,) + self.rows[r + 1:])

    def with_value_for_group(self, group, pos):
        board = self
        for point in group:
            board = board.with_value_at(point, pos)
        return board

    def points(self):
        return (P(r, c) for r in range(self.size) for c in range(self.size))

    def group_at(self, point, player=None):
        """Return the connected group of ``player`` stones containing ``point``.

        ``player`` defaults to whatever occupies ``point``. The seed is always
        part of the result, so calling this with a seed the player does not
        own gives a meaningless (but finite) answer.
        """
        point = self.ensure_point(point)
        if player is None:
            player = self.value_at(point)
        group = {point}
        to_visit = [point]
        while to_visit:
            this_point = to_visit.pop()
            for neighboring_point in this_point.neighbors:
                if neighboring_point in group or self.off_board(neighboring_point):
                    continue
                if self[neighboring_point] == player:
                    group.add(neighboring_point)
                    to_visit.append(neighboring_point)
        return frozenset(group)

    def liberties_at(self, point):
        point = self.ensure_point(point)
        return [n for n in point.neighbors if self.value_at(n) == Pos.Empty]

    def liberties_for_group(self, group):
        # Not de-duplicated: two members may share a liberty.
        return [liberty for point in group for liberty in self.liberties_at(point)]

    def group_liberty_count(self, point):
        if self.value_at(point) in (Pos.Empty, Pos.OffBoard):
            return 0
        return len(set(self.liberties_for_group(self.group_at(point))))

    def remove_captured_stones(self, point, player):
        """Remove enemy groups next to ``point`` that have no liberties left."""
        point = self.ensure_point(point)
        enemy_pos = player.other
        enemy_groups = {self.group_at(n, enemy_pos)
                        for n in point.neighbors
                        if self.value_at(n) == enemy_pos}
        groups_to_kill = [g for g in enemy_groups if not self.liberties_for_group(g)]
        board = self
        for group in groups_to_kill:
            board = board.with_value_for_group(group, Pos.Empty)
        return board

    def apply_move(self, point, player):
        point = self.ensure_point(point)
        if type(player) is not Position or not player.is_player:
            raise IllegalMoveError(f'Expected Black or White, but got {player}')
        if self.off_board(point):
            raise IllegalMoveError(f'Invalid move, {repr(point)} is not on the board')
        if self[point] != Pos.Empty:
            raise IllegalMoveError(f'Invalid move, {repr(point)} is not empty')
        return self.with_value_at(point, player).remove_captured_stones(point, player)

    def try_move(self, point, player):
        """Play ``point`` for ``player`` and check that the stone survives.

        Returns ``(next_board, True)`` when the played stone still has a
        liberty once captures are resolved, otherwise ``(self, False)``.
        """
        point = self.ensure_point(point)
        next_board = self.apply_move(point, player)
        if next_board.liberties_at(point):
            return next_board, True
        return self, False

    def valid_moves(self, pos):
        valid_moves = set()
        for p in self.points():
            if self[p] == Pos.Empty and self.try_move(p, pos)[1]:
                valid_moves.add(p)
        return valid_moves

    def is_eye(self, point, pos):
        return all(self.off_board(n) or
                   (self[n] == pos and self.group_liberty_count(n) > 1)
                   for n in self.ensure_point(point).neighbors)

    @property
    def state(self):
        return b''.join(p.char for row in self.rows for p in row)

    @property
    def state_string(self):
        return self.state.decode('utf8')

    def printable_board(self):
        lines = []
        for i, row in enumerate(self.rows):
            lines.append('---'.join(p.symbol for p in row))
            if i != self.size - 1:
                lines.append('   '.join('|' for _ in row))
        return '\n'.join(lines) + '\n'

    def __str__(self):
        return self.printable_board()


def make_board(size=DEFAULT_BOARD_SIZE):
    return Board(size)


def replay(moves, size=DEFAULT_BOARD_SIZE):
    board = Board(size)
    for point, player in moves:
        board = board.apply_move(point, player)
    return board
