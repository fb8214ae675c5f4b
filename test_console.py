import console
from console import parse_point_input, get_input, play_game, player_sequence
from goban import Board, P, Pos


def reader(lines):
    lines = iter(lines)

    def read():
        try:
            return next(lines)
        except StopIteration:
            raise EOFError
    return read


def test_player_sequence_alternates():
    players = player_sequence()
    assert [next(players) for _ in range(4)] == [Pos.Black, Pos.White, Pos.Black, Pos.White]


def test_parse_point_input():
    assert parse_point_input('1 2') == P(1, 2)
    assert parse_point_input(' 3   4 ') == P(3, 4)
    assert parse_point_input('1') is None
    assert parse_point_input('1 2 3') is None
    assert parse_point_input('a b') is None
    assert parse_point_input('') is None


def test_get_input_reprompts():
    out = []
    b = Board().apply_move((0, 0), Pos.Black)
    move = get_input(b, reader(['x', '9 9', '0 0', '1 1']), out.append)
    assert move == P(1, 1)
    assert out == [
        'invalid input, try again.',
        'invalid input, point not on board.',
        'invalid input, point already taken.',
    ]


def test_get_input_control_tokens():
    b = Board()
    assert get_input(b, reader(['q']), print) == 'quit'
    assert get_input(b, reader(['quit']), print) == 'quit'
    assert get_input(b, reader(['pass']), print) == 'pass'
    assert get_input(b, reader(['resign']), print) == 'resign'
    assert get_input(b, reader([]), print) == 'quit'


def test_play_game_pass_and_resign():
    out = []
    result = play_game(Board(), read=reader(['2 2', '2 3', 'pass', 'resign']), write=out.append)
    assert result.reason == 'resign'
    assert result.player == Pos.White
    assert result.board[2, 2] == Pos.Black
    assert result.board[2, 3] == Pos.White
    assert 'passing...\n' in out
    assert 'player White resigned!\n' in out


def test_play_game_retries_illegal_move():
    b = Board.from_rows([
        '.w...',
        'w....',
        '.....',
        '.....',
        '.....',
    ])
    out = []
    result = play_game(b, read=reader(['0 0', '4 4', 'quit']), write=out.append)
    assert 'illegal move! try again..' in out
    assert result.reason == 'quit'
    assert result.player == Pos.White
    assert result.board[0, 0] == Pos.Empty
    assert result.board[4, 4] == Pos.Black


def test_play_game_shows_board():
    out = []
    play_game(Board(2), read=reader([]), write=out.append)
    assert out[0] == 'Current Turn: Black'
    assert '+---+\n|   |\n+---+\n' in out


def test_main_uses_board_size(monkeypatch):
    boards = []
    monkeypatch.setattr(console, 'play_game', boards.append)
    console.main(['--size', '3'])
    assert boards == [Board(3)]
