import argparse
import random
from collections import namedtuple
from tqdm import tqdm
from goban import Board, Pos, DEFAULT_BOARD_SIZE


RandomGame = namedtuple('RandomGame', 'board moves')


def random_move(board, pos):
    reasonable_moves = [m for m in board.valid_moves(pos) if not board.is_eye(m, pos)]
    if not reasonable_moves:
        return None
    return random.choice(sorted(reasonable_moves))


def play_random_game(board_size=DEFAULT_BOARD_SIZE, max_moves=None):
    """Play random moves until both players pass or ``max_moves`` is reached.

    Returns the final board and the list of ``(point, player)`` moves, with
    passes left out, so the game can be fed straight back into ``replay``.
    """
    if max_moves is None:
        max_moves = 3 * board_size**2
    board = Board(board_size)
    moves = []
    passes = 0
    player = Pos.Black
    for _ in range(max_moves):
        move = random_move(board, player)
        if move is None:
            passes += 1
            if passes == 2:
                break
        else:
            passes = 0
            board = board.apply_move(move, player)
            moves.append((move, player))
        player = player.other
    return RandomGame(board, moves)


def play_random_games(n_games, board_size=DEFAULT_BOARD_SIZE, max_moves=None, verbose=True):
    games = []
    for _ in tqdm(range(n_games), disable=not verbose):
        games.append(play_random_game(board_size, max_moves))
    return games


def main(argv=None):
    parser = argparse.ArgumentParser(description='Time random self-play games.')
    parser.add_argument('-g', '--games', type=int, metavar='<int>', default=100)
    parser.add_argument('-s', '--size', type=int, metavar='<int>', default=DEFAULT_BOARD_SIZE)
    parser.add_argument('-m', '--max-moves', type=int, metavar='<int>', default=None)
    args = parser.parse_args(argv)
    games = play_random_games(args.games, args.size, args.max_moves)
    total_moves = sum(len(g.moves) for g in games)
    print('{:,} games, {:,} moves'.format(len(games), total_moves))


if __name__ == '__main__':
    main()
