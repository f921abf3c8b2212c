'''
Progress text for archive and retrieve runs. Everything here only prints;
nothing affects what gets dispatched.

Lines that a calling script may want to grep for carry a fixed prefix:
ERROR:, WARNING:, [DRY RUN] and Note:.
'''

import sys

from datetime import datetime

from packarc.misc.templates import render

PLACEHOLDERS = {
    'archive': '(entire source directory)',
    'retrieve': '(entire archive)',
}


def now():
    return datetime.now().astimezone().strftime('%a %b %d %H:%M:%S %Z %Y')


def directories(config):
    '''
    The configured subdirectories for display, or a placeholder naming the
    whole tree when there are none.
    '''
    if config.unit_names:
        return ' '.join(config.unit_names)
    return PLACEHOLDERS[config.mode]


def banner(config):
    print(render('banner.txt', mode=config.mode, config=config, date=now(), directories=directories(config)))
    print()


def unit_header(unit, config):
    print()
    print(render('unit_header.txt', mode=config.mode, unit=unit, date=now()))


def unit_footer(unit):
    print(render('unit_footer.txt', unit=unit, date=now()))


def summary(config):
    print()
    print(render('summary.txt', mode=config.mode, config=config, date=now()))


def dry_run(message):
    print(f'[DRY RUN] {message}')


def warning(message):
    print(f'WARNING: {message}')


def errors(problems):
    for problem in problems:
        print(f'ERROR: {problem}', file=sys.stderr)


def configuration_errors(problems):
    errors(problems)
    print('', file=sys.stderr)
    print('Please fix the configuration errors above and try again.', file=sys.stderr)

# END
