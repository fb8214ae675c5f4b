import argparse
import itertools
from collections import namedtuple
from goban import Board, Pos, P, DEFAULT_BOARD_SIZE, is_point


CONTROL_TOKENS = {
    'q': 'quit',
    'quit': 'quit',
    'pass': 'pass',
    'resign': 'resign',
}


GameResult = namedtuple('GameResult', 'board reason player')


def player_sequence():
    """Endless Black, White, Black, ... turn order."""
    return itertools.cycle([Pos.Black, Pos.White])


def parse_point_input(s):
    try:
        values = tuple(int(v) for v in s.split())
    except ValueError:
        return None
    if not is_point(values):
        return None
    return P(*values)


def get_input(board, read=input, write=print):
    while True:
        try:
            raw_input = read().strip()
        except EOFError:
            return 'quit'
        if raw_input in CONTROL_TOKENS:
            return CONTROL_TOKENS[raw_input]
        point = parse_point_input(raw_input)
        if point is None:
            write('invalid input, try again.')
        elif board.off_board(point):
            write('invalid input, point not on board.')
        elif board[point] != Pos.Empty:
            write('invalid input, point already taken.')
        else:
            return point


def play_game(board, players=None, read=input, write=print):
    players = players or player_sequence()
    player = next(players)
    while True:
        write(f'Current Turn: {player.name}')
        write('Current board:')
        write(board.printable_board())
        move = get_input(board, read, write)
        if move == 'quit':
            write('exiting...\n')
            return GameResult(board, 'quit', player)
        if move == 'resign':
            write(f'player {player.name} resigned!\n')
            return GameResult(board, 'resign', player)
        if move == 'pass':
            write('passing...\n')
            player = next(players)
            continue
        write(f'point: {move.row} {move.col}\n')
        board, legal = board.try_move(move, player)
        if legal:
            player = next(players)
        else:
            write('illegal move! try again..')


def main(argv=None):
    parser = argparse.ArgumentParser(description='Play Go on the terminal.')
    parser.add_argument('-s', '--size',
                        type=int,
                        metavar='<int>',
                        default=DEFAULT_BOARD_SIZE,
                        help='The board size (default: %(default)s).')
    args = parser.parse_args(argv)
    if args.size < 1:
        parser.error('board size must be positive')
    print('Enter moves as "row col", or one of: pass, resign, quit.')
    play_game(Board(args.size))


if __name__ == '__main__':
    main()
