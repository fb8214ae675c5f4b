import random
import re
import sys
import traceback
from goban import Board, P, Pos, DEFAULT_BOARD_SIZE


MAX_BOARD_SIZE = 25


def letter_to_int(letter):
    return ord(letter) - 64 if letter < 'I' else ord(letter) - 65


def int_to_letter(int):
    return chr(int + 64) if int < (ord('I') - 64) else chr(int + 65)


def gtp_vertex_to_point(v):
    v = v.strip().upper()
    if not re.fullmatch(r'[A-HJ-Z][0-9]+', v):
        raise ValueError(f'Invalid vertex: {repr(v)}')
    return P(int(v[1:]) - 1, letter_to_int(v[0]) - 1)


def point_to_gtp_vertex(p):
    r, c = p
    return int_to_letter(c + 1) + str(r + 1)


def color_to_pos(c):
    if c in {'B', 'b', 'black'}:
        return Pos.Black
    if c in {'W', 'w', 'white'}:
        return Pos.White
    raise ValueError(f'Unknown color: {repr(c)}')


def pos_to_color(p):
    return p.char.decode('utf8').upper()


class Game:
    def __init__(self, board_size=DEFAULT_BOARD_SIZE):
        self.board_size = board_size
        self.board = Board(board_size)
        self.history = []
        self.komi = None

    @staticmethod
    def command_name(_args):
        return 'goban-engine'

    @staticmethod
    def command_version(_args):
        return '1'

    @staticmethod
    def command_protocol_version(_args):
        return '2'

    @staticmethod
    def command_list_commands(_args):
        return '\n'.join([m.partition('_')[2] for m in dir(Game) if m.startswith('command_')])

    @staticmethod
    def command_known_command(command_name):
        return 'true' if hasattr(Game, 'command_' + command_name.strip()) else 'false'

    @staticmethod
    def command_quit(_args):
        pass

    def command_komi(self, new_komi):
        self.komi = float(new_komi)

    def command_boardsize(self, board_size):
        board_size = int(board_size)
        if not 1 <= board_size <= MAX_BOARD_SIZE:
            raise ValueError(f'unacceptable size: {board_size}')
        self.board_size = board_size
        self.command_clear_board('')

    def command_clear_board(self, _args):
        self.board = Board(self.board_size)
        self.history = []

    def command_play(self, args):
        color, _, vertex = args.strip().partition(' ')
        pos = color_to_pos(color)
        if vertex.strip().lower() == 'pass':
            self.history.append(self.board)
            return
        point = gtp_vertex_to_point(vertex)
        if self.board.value_at(point) != Pos.Empty:
            raise ValueError('illegal move')
        next_board, legal = self.board.try_move(point, pos)
        if not legal:
            raise ValueError('illegal move')
        self.history.append(self.board)
        self.board = next_board
        log('Board state:\n' + self.board.printable_board())

    def command_genmove(self, color):
        pos = color_to_pos(color.strip())
        valid_moves = self.board.valid_moves(pos)
        if len(valid_moves) == 0:
            return 'resign'
        selected_move = random.choice(sorted(valid_moves))
        self.history.append(self.board)
        self.board = self.board.apply_move(selected_move, pos)
        log('Board state:\n' + self.board.printable_board())
        return point_to_gtp_vertex(selected_move)

    def command_undo(self, _args):
        if not self.history:
            raise ValueError('cannot undo')
        self.board = self.history.pop()

    def command_showboard(self, _args):
        return '\n' + self.board.printable_board()


logging = True
log_to = '/tmp/gtpdebug'


def log(s):
    if logging:
        with open(log_to, 'a') as f:
            f.write(s + '\n')


def send_response(s):
    sys.stdout.write(s)
    sys.stdout.flush()
    log(f'Sent response: {repr(s)}')


def main():
    log('='*85)
    log('='*40 + ' NEW ' + '='*40)
    log('='*85)
    command_re = re.compile(r'(?P<id>[0-9]+)? ?(?P<command_name>\w+) ?(?P<args>.*)')
    game = Game()
    for line in sys.stdin:
        if not line.strip() or line.lstrip().startswith('#'):
            continue
        command = re.match(command_re, line.strip())
        if command is None:
            send_response('? unknown command\n\n')
            continue
        log(f'Parsed {command.groups()} from {repr(line)}')
        command_id = command.group('id') or ''
        handler = getattr(game, 'command_' + command.group('command_name'), None)
        if handler is None:
            send_response(f'?{command_id} unknown command\n\n')
            continue
        try:
            response = handler(command.group('args'))
        except ValueError as e:
            log(f'Rejected command {repr(line)}: {e}')
            send_response(f'?{command_id} {e}\n\n')
            continue
        except Exception:
            log(f'Failed on command: {repr(line)}')
            log(traceback.format_exc())
            raise
        response = response or ''
        send_response(f'={command_id} {response}\n\n')
        if command.group('command_name') == 'quit':
            log('=' * 80 + ' QUIT')
            return


if __name__ == '__main__':
    main()
