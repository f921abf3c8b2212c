import pathlib
import os


class Config:
    '''
    Site defaults for archiving to and retrieving from tape, read from the
    environment. Unset variables fall back to paths derived from the user
    name and project, e.g. for USER=k202134 and PACKARC_PROJECT=bb1469:

    PACKARC_SOURCE_BASE=/work/bb1469/k202134
    PACKARC_ARCHIVE_BASE=/arch/bb1469/k202134
    PACKARC_RESTORE_BASE=/work/bb1469/k202134_restored
    PACKARC_STAGING_BASE=/scratch/k/k202134/packems_staging
    '''
    def __init__(self, environ=None):
        env = os.environ if environ is None else environ
        self._USER = env.get('USER')
        self._PACKARC_PROJECT = env.get('PACKARC_PROJECT')
        self._PACKARC_SOURCE_BASE = env.get('PACKARC_SOURCE_BASE')
        self._PACKARC_ARCHIVE_BASE = env.get('PACKARC_ARCHIVE_BASE')
        self._PACKARC_RESTORE_BASE = env.get('PACKARC_RESTORE_BASE')
        self._PACKARC_STAGING_BASE = env.get('PACKARC_STAGING_BASE')
        self._PACKARC_DIRS = env.get('PACKARC_DIRS')
        self._PACKARC_TAR_TARGET_GB = env.get('PACKARC_TAR_TARGET_GB')
        self._PACKARC_TAR_MAX_GB = env.get('PACKARC_TAR_MAX_GB')
        self._PACKARC_PACKEMS_EXE = env.get('PACKARC_PACKEMS_EXE')
        self._PACKARC_UNPACKEMS_EXE = env.get('PACKARC_UNPACKEMS_EXE')
        self._PACKARC_SLURM_ACCOUNT = env.get('PACKARC_SLURM_ACCOUNT')
        self._PACKARC_SLURM_PARTITION = env.get('PACKARC_SLURM_PARTITION')
        self._PACKARC_MODULES = env.get('PACKARC_MODULES')

    @property
    def USER(self):
        return self._USER or 'unknown'

    @property
    def PACKARC_PROJECT(self):
        return self._PACKARC_PROJECT or 'bb1469'

    @property
    def PACKARC_SOURCE_BASE(self):
        if self._PACKARC_SOURCE_BASE:
            return pathlib.Path(self._PACKARC_SOURCE_BASE)
        return pathlib.Path('/work') / self.PACKARC_PROJECT / self.USER

    @property
    def PACKARC_ARCHIVE_BASE(self):
        if self._PACKARC_ARCHIVE_BASE:
            return pathlib.Path(self._PACKARC_ARCHIVE_BASE)
        return pathlib.Path('/arch') / self.PACKARC_PROJECT / self.USER

    @property
    def PACKARC_RESTORE_BASE(self):
        if self._PACKARC_RESTORE_BASE:
            return pathlib.Path(self._PACKARC_RESTORE_BASE)
        source = self.PACKARC_SOURCE_BASE
        if not source.name:
            # "/" has no name to suffix.
            return source / 'restored'
        return source.with_name(f'{source.name}_restored')

    @property
    def PACKARC_STAGING_BASE(self):
        if self._PACKARC_STAGING_BASE:
            return pathlib.Path(self._PACKARC_STAGING_BASE)
        # Scratch on Levante is bucketed by the first letter of the user name.
        return pathlib.Path('/scratch') / self.USER[0] / self.USER / 'packems_staging'

    @property
    def PACKARC_DIRS(self):
        '''
        Space separated in the environment. Returns a list, possibly empty.
        '''
        return (self._PACKARC_DIRS or '').split()

    @property
    def PACKARC_TAR_TARGET_GB(self):
        return int(self._PACKARC_TAR_TARGET_GB or 100)

    @property
    def PACKARC_TAR_MAX_GB(self):
        return int(self._PACKARC_TAR_MAX_GB or 110)

    @property
    def PACKARC_PACKEMS_EXE(self):
        return pathlib.Path(self._PACKARC_PACKEMS_EXE or 'packems')

    @property
    def PACKARC_UNPACKEMS_EXE(self):
        return pathlib.Path(self._PACKARC_UNPACKEMS_EXE or 'unpackems')

    @property
    def PACKARC_SLURM_ACCOUNT(self):
        return self._PACKARC_SLURM_ACCOUNT or 'ab0995'

    @property
    def PACKARC_SLURM_PARTITION(self):
        return self._PACKARC_SLURM_PARTITION or 'shared'

    @property
    def PACKARC_MODULES(self):
        return (self._PACKARC_MODULES or 'packems').split()

config = Config()


def cli(args):
    '''
    Command line interface for configuration settings.
    '''
    if args.list:
        print('Current configuration settings:')
        for key in dir(config):
            if not key.startswith('_'):
                value = getattr(config, key)
                print(f'{key}={value}')

    return 0
