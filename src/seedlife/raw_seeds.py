# Raw seed arrays for the reference 50x40 grid.
# Each seed is drawn as pictures ('#' live, anything else dead) placed at
# (top row, left column), then flattened to a list of 0/1 integers.

from seedlife.config import CELLULES_HEIGHT, CELLULES_WIDTH


def draw_raw_array(placements, ncols = CELLULES_WIDTH, nrows = CELLULES_HEIGHT):
    arr = [0] * (ncols * nrows)
    for top, left, picture in placements:
        for r, line in enumerate(picture):
            for c, ch in enumerate(line):
                if ch == '#':
                    arr[((top + r) % nrows) * ncols + (left + c) % ncols] = 1
    return arr


GLIDER = (
    '.#.',
    '..#',
    '###',
    )

BLINKER = ('###',)

BEEHIVE = (
    '.##.',
    '#..#',
    '.##.',
    )

LETTERS = {
    'B': ('###.', '#..#', '###.', '#..#', '###.'),
    'C': ('.###', '#...', '#...', '#...', '.###'),
    'E': ('####', '#...', '###.', '#...', '####'),
    'H': ('#..#', '#..#', '####', '#..#', '#..#'),
    'I': ('###', '.#.', '.#.', '.#.', '###'),
    'A': ('.##.', '#..#', '####', '#..#', '#..#'),
    'G': ('.###', '#...', '#.##', '#..#', '.###'),
    'L': ('#...', '#...', '#...', '#...', '####'),
    'M': ('#...#', '##.##', '#.#.#', '#...#', '#...#'),
    'O': ('.##.', '#..#', '#..#', '#..#', '.##.'),
    'R': ('###.', '#..#', '###.', '#.#.', '#..#'),
    'S': ('.###', '#...', '.##.', '...#', '###.'),
    'h': ('#...', '#...', '###.', '#..#', '#..#'),
    'm': ('.....', '##.#.', '#.#.#', '#.#.#', '#.#.#'),
    '2': ('###.', '...#', '.##.', '#...', '####'),
    '4': ('#..#', '#..#', '####', '...#', '...#'),
    }


def word(text, top, left, gap = 2):
    placements = list()
    for ch in text:
        if ch != ' ':
            placements.append((top, left, LETTERS[ch]))
            left += max(len(line) for line in LETTERS[ch]) + gap
        else:
            left += 3
    return placements


def seed_raw_bim_array():
    return draw_raw_array(
        word('BIM', 12, 18) + [(24, 14, BEEHIVE), (25, 32, BLINKER)])


def seed_raw_c_array():
    big_c = (
        '..######',
        '.#......',
        '#.......',
        '#.......',
        '#.......',
        '#.......',
        '.#......',
        '..######',
        )
    return draw_raw_array([(16, 21, big_c)])


def seed_raw_coles_array():
    return draw_raw_array(word('COLES', 17, 13))


def seed_raw_cube_array():
    cube = (
        '..######',
        '.#....##',
        '######.#',
        '#....#.#',
        '#....#.#',
        '#....#.#',
        '#....##.',
        '######..',
        )
    return draw_raw_array([(16, 21, cube)])


def seed_raw_diamond_array():
    diamond = (
        '....#....',
        '...#.#...',
        '..#...#..',
        '.#.....#.',
        '#.......#',
        '.#.....#.',
        '..#...#..',
        '...#.#...',
        '....#....',
        )
    return draw_raw_array([(15, 20, diamond)])


def seed_raw_glider_array():
    return draw_raw_array([(2, 2, GLIDER)])


def seed_raw_hmm_array():
    return draw_raw_array(word('hmm', 17, 16))


def seed_raw_forty_two_array():
    return draw_raw_array(word('42', 17, 20))


def seed_raw_ligma_array():
    return draw_raw_array(word('LIGMA', 17, 12))


def seed_raw_mrsir_array():
    return draw_raw_array(word('MR SIR', 17, 11))


def seed_raw_wall_array():
    wall = ('#',) * CELLULES_HEIGHT
    return draw_raw_array([(0, CELLULES_WIDTH // 2, wall)])


def seed_raw_windmills_array():
    return draw_raw_array([
        (9, 11, BLINKER), (9, 36, BLINKER),
        (29, 11, BLINKER), (29, 36, BLINKER),
        (19, 22, GLIDER),
        ])
