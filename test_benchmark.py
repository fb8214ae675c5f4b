import random
from benchmark import play_random_game, play_random_games, random_move
from goban import Board, Pos, replay


def test_random_game_replays_to_same_board():
    random.seed(1)
    game = play_random_game(board_size=4)
    print(game.board)
    assert game.moves
    assert replay(game.moves, 4) == game.board


def test_random_move_skips_own_eyes():
    b = Board.from_rows([
        '.b',
        'b.',
    ])
    assert random_move(b, Pos.Black) is None
    assert random_move(Board(1), Pos.White) is None


def test_max_moves():
    game = play_random_game(board_size=3, max_moves=0)
    assert game.board == Board(3)
    assert game.moves == []


def test_play_random_games():
    games = play_random_games(2, board_size=3, verbose=False)
    assert len(games) == 2
