import logging

from packarc.data.base import ValidationResult

logger = logging.getLogger(__name__)


def validate(config):
    '''
    Check the configuration before anything is created or packed. Only reads
    the filesystem.

    Archive runs need an existing source root and, when subdirectories are
    named, at least one of them. Whole-tree runs are not checked per unit.
    Retrieve runs are not pre-checked; the tape side is only known to
    unpackems.

    Returns
    -------
    ValidationResult
        With every problem found, so all of them can be fixed in one go.
    '''
    problems = []

    if config.mode == 'archive':
        if not config.base_source.is_dir():
            problems.append(f'Source base directory does not exist: {config.base_source}')

        if config.unit_names:
            found = [name for name in config.unit_names if (config.base_source / name).is_dir()]
            logger.debug('Found %d of %d directories in %s' % (len(found), len(config.unit_names), config.base_source))
            if len(found) == 0:
                problems.append(
                    f'None of the specified directories exist in {config.base_source}\n'
                    f'       Directories specified: {" ".join(config.unit_names)}'
                )

    return ValidationResult.from_problems(problems)

# END
