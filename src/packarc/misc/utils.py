import itertools
import logging
import subprocess

logger = logging.getLogger(__name__)


def disk_usage(path):
    '''
    Human-readable size of `path` as reported by `du -sh`, e.g. '1.2T'.

    du still prints a total when some subdirectories cannot be read, so its
    exit code is ignored. Returns None if it printed nothing (missing path)
    or is not installed.
    '''
    try:
        res = subprocess.run(
            ['du', '-sh', str(path)],
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as e:
        logger.debug('Could not compute size of %s: %s' % (path, e))
        return None
    if res.returncode != 0:
        logger.debug('du exited with %d for %s: %s' % (res.returncode, path, res.stderr.strip()))
    fields = res.stdout.split()
    return fields[0] if fields else None


def head(path, n=20):
    '''
    First `n` lines of a text file, without trailing newlines.
    '''
    with open(path, 'r', errors='replace') as f:
        return [line.rstrip('\n') for line in itertools.islice(f, n)]
