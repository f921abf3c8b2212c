import pathlib

from collections import namedtuple


MODES = ('archive', 'retrieve')


class WorkUnit(namedtuple('WorkUnit', ['name', 'source_path', 'staging_path', 'remote_path'])):
    '''
    One directory (or an entire tree) moved to or from tape in a single pass.

    source_path
        Archive: the directory on the work filesystem.
        Retrieve: where the data is restored to.
    staging_path
        Scratch directory holding the tar balls and INDEX.txt.
    remote_path
        Directory on the tape archive.
    '''
    __slots__ = ()

    def __new__(cls, name, source_path, staging_path, remote_path):
        if not name:
            raise ValueError('A work unit needs a non-empty name.')
        return super().__new__(
            cls,
            str(name),
            pathlib.Path(source_path),
            pathlib.Path(staging_path),
            pathlib.Path(remote_path),
        )


def check_unit_name(name):
    '''
    A unit name is a single directory name below each base. Absolute paths,
    names containing a slash, "." and ".." would leave the base directories.
    '''
    name = str(name)
    if name in ('.', '..') or '/' in name:
        raise ValueError(f'Not a subdirectory name: {name!r}')
    return name


class RunConfig:
    '''
    Settings for a single archive or retrieve run. Built once, from the
    environment defaults and command line flags, and read-only afterwards.

    Parameters
    ----------
    mode : {'archive', 'retrieve'}
    base_source : str or pathlib.Path
        Work filesystem tree. Archive reads from it, retrieve restores into it.
    base_destination : str or pathlib.Path
        Tape archive tree.
    base_staging : str or pathlib.Path
        Scratch directory for tar balls.
    unit_names : iterable of str, optional
        Subdirectories to process, in order. Empty means the whole tree.
    dry_run : bool
    packing_target_size, packing_max_size : int
        Tar ball target and maximum size in GB (archive only).

    >>> cfg = RunConfig('archive', '/work/p/u/data', '/arch/p/u/data', '/scratch/u/u/staging')
    >>> cfg.unit_names
    ()
    '''
    def __init__(
            self,
            mode,
            base_source,
            base_destination,
            base_staging,
            unit_names=(),
            dry_run=False,
            packing_target_size=100,
            packing_max_size=110,
            username=None,
            project=None,
        ):
        if mode not in MODES:
            raise ValueError(f'mode must be one of {MODES}, not {mode!r}')
        for label, size in (('Target', packing_target_size), ('Maximum', packing_max_size)):
            if int(size) <= 0:
                raise ValueError(f'{label} tar ball size must be a positive number of GB, not {size}.')
        if packing_max_size < packing_target_size:
            raise ValueError(
                f'Maximum tar ball size ({packing_max_size}GB) is smaller than '
                f'the target size ({packing_target_size}GB).'
            )
        self._mode = mode
        self._base_source = pathlib.Path(base_source)
        self._base_destination = pathlib.Path(base_destination)
        self._base_staging = pathlib.Path(base_staging)
        self._unit_names = tuple(check_unit_name(name) for name in (unit_names or ()) if name)
        self._dry_run = bool(dry_run)
        self._packing_target_size = int(packing_target_size)
        self._packing_max_size = int(packing_max_size)
        self._username = username
        self._project = project

    def __repr__(self):
        return (
            f'{self.__class__.__name__}({self.mode!r}, "{self.base_source}", '
            f'"{self.base_destination}", "{self.base_staging}", '
            f'unit_names={self.unit_names!r}, dry_run={self.dry_run})'
        )

    @property
    def mode(self):
        return self._mode

    @property
    def base_source(self):
        return self._base_source

    @property
    def base_destination(self):
        return self._base_destination

    @property
    def base_staging(self):
        return self._base_staging

    @property
    def unit_names(self):
        return self._unit_names

    @property
    def dry_run(self):
        return self._dry_run

    @property
    def packing_target_size(self):
        return self._packing_target_size

    @property
    def packing_max_size(self):
        return self._packing_max_size

    @property
    def username(self):
        return self._username

    @property
    def project(self):
        return self._project

    @property
    def whole_tree(self):
        return len(self._unit_names) == 0


class ValidationResult(namedtuple('ValidationResult', ['ok', 'problems'])):
    __slots__ = ()

    @classmethod
    def from_problems(cls, problems):
        problems = list(problems)
        return cls(len(problems) == 0, problems)


# status is one of 'planned' (dry-run), 'done' or 'skipped'.
UnitResult = namedtuple('UnitResult', ['unit', 'status', 'notes'])
