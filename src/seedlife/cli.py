# Command line entry point: validate, render_seeds, survey.

import argparse
import json
import logging
import sys

from seedlife.config import MAXIMUM_STEP_COUNT
from seedlife.errors import MalformedInput, SeedLifeError
from seedlife.logutil import init_game_log, timing
from seedlife.renderer import render_seeds
from seedlife.seeds import default_catalog
from seedlife.survey import survey_seeds
from seedlife.validator import load_submission, validate_submission


def run_validate(args):
    try:
        if args.input == '-':
            text = sys.stdin.buffer.read()
        else:
            with open(args.input, 'rb') as f:
                text = f.read()
    except OSError as e:
        raise MalformedInput('Cannot read submission {}: {}'.format(args.input, e)) from e
    submission = load_submission(text)
    result = validate_submission(submission, max_steps=args.max_steps)
    print(json.dumps(result.to_dict()))


def run_render_seeds(args):
    for path in render_seeds(default_catalog(), args.output_dir):
        print(path)


def run_survey(args):
    df = survey_seeds(default_catalog(), max_steps=args.max_steps)
    if args.csv:
        df.to_csv(args.csv)
    print(df.to_string())


def build_parser():
    parser = argparse.ArgumentParser(
        prog='seedlife', description="Conway's Game of Life seeds and submission checks")
    parser.add_argument('--log-dir', default=None,
                        help='Write seedlife.log here instead of stderr')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log at DEBUG level')
    commands = parser.add_subparsers(dest='command', required=True)

    validate = commands.add_parser('validate', help='Check a JSON submission')
    validate.add_argument('input', nargs='?', default='-',
                          help='Submission file (default: stdin)')
    validate.add_argument('--max-steps', type=int, default=MAXIMUM_STEP_COUNT)
    validate.set_defaults(func=run_validate)

    render = commands.add_parser('render_seeds', help='Draw every seed as a PNG')
    render.add_argument('--output-dir', default=None)
    render.set_defaults(func=run_render_seeds)

    survey = commands.add_parser('survey', help='Tabulate how each seed ends')
    survey.add_argument('--csv', default=None, help='Also save the table here')
    survey.add_argument('--max-steps', type=int, default=MAXIMUM_STEP_COUNT)
    survey.set_defaults(func=run_survey)
    return parser


def main(argv = None):
    args = build_parser().parse_args(argv)
    init_game_log(args.command, logging.DEBUG if args.verbose else logging.INFO,
                  args.log_dir)
    logging.info('Running command: {}'.format(args.command))
    try:
        args.func(args)
    except SeedLifeError as e:
        logging.critical('{} failed: {}'.format(args.command, e))
        return 1
    logging.info('Finished {} in {}'.format(args.command, timing()))
    return 0


if __name__ == '__main__':
    sys.exit(main())
