import logging
import pathlib
import shlex
import subprocess

from packarc.misc.config import config
from packarc.misc.errors import ExternalToolFailure

logger = logging.getLogger(__name__)


class Packems:
    '''
    Wrapper for the `packems` command line tool. Bundles the files of
    `source_directory` into tar balls of roughly `target_size` GB under
    `pack_directory` and sends them to `archive_directory` on tape.

    Parameters
    ----------
    source_directory : str or pathlib.Path
    pack_directory : str or pathlib.Path
        Local staging directory for the tar balls (-d).
    archive_directory : str or pathlib.Path
        Archive subdirectory on tape (-S).
    prefix : str
        Prefix for the tar ball names (-o).
    target_size, max_size : int
        Target and maximum tar ball size in GB (-t, -m).
    executable_filepath : str or pathlib.Path, optional

    >>> Packems('/work/a/b/run1', '/scratch/b/b/staging/run1', '/arch/a/b/run1', 'run1').cmd
    'packems -t 100 -m 110 -d /scratch/b/b/staging/run1 -S /arch/a/b/run1 -o run1 /work/a/b/run1'
    '''
    def __init__(self,
            source_directory,
            pack_directory,
            archive_directory,
            prefix,
            target_size=100,
            max_size=110,
            executable_filepath=None,
        ):
        self.executable_filepath = executable_filepath
        self.source_directory = pathlib.Path(source_directory)
        self.pack_directory = pathlib.Path(pack_directory)
        self.archive_directory = pathlib.Path(archive_directory)
        self.prefix = prefix
        self.target_size = target_size
        self.max_size = max_size

    def __repr__(self):
        return self.cmd

    @property
    def executable_filepath(self):
        return self._executable_filepath

    @executable_filepath.setter
    def executable_filepath(self, value):
        if value is None:
            self._executable_filepath = pathlib.Path('packems')
        else:
            self._executable_filepath = pathlib.Path(value)

    @property
    def target_size(self):
        return self._target_size

    @target_size.setter
    def target_size(self, value):
        if int(value) <= 0:
            raise ValueError("target_size must be a positive number of GB")
        self._target_size = int(value)

    @property
    def max_size(self):
        return self._max_size

    @max_size.setter
    def max_size(self, value):
        if int(value) <= 0:
            raise ValueError("max_size must be a positive number of GB")
        self._max_size = int(value)

    @property
    def cmdlist(self):
        return [
            str(self.executable_filepath),
            '-t', str(self.target_size),
            '-m', str(self.max_size),
            '-d', str(self.pack_directory),
            '-S', str(self.archive_directory),
            '-o', str(self.prefix),
            str(self.source_directory),
        ]

    @property
    def cmd(self):
        return ' '.join(self.cmdlist)

    def run(self):
        _run(self.cmdlist)


class Unpackems:
    '''
    Wrapper for the `unpackems` command line tool. Unpacks the tar balls in
    `pack_directory` (fetched from tape if necessary) into `destination`.

    >>> Unpackems('/work/a/b/run1', '/scratch/b/b/staging/run1').cmd
    'unpackems -d /work/a/b/run1 /scratch/b/b/staging/run1'
    '''
    def __init__(self, destination, pack_directory, executable_filepath=None):
        self.executable_filepath = executable_filepath
        self.destination = pathlib.Path(destination)
        self.pack_directory = pathlib.Path(pack_directory)

    def __repr__(self):
        return self.cmd

    @property
    def executable_filepath(self):
        return self._executable_filepath

    @executable_filepath.setter
    def executable_filepath(self, value):
        if value is None:
            self._executable_filepath = pathlib.Path('unpackems')
        else:
            self._executable_filepath = pathlib.Path(value)

    @property
    def cmdlist(self):
        return [
            str(self.executable_filepath),
            '-d', str(self.destination),
            str(self.pack_directory),
        ]

    @property
    def cmd(self):
        return ' '.join(self.cmdlist)

    def run(self):
        _run(self.cmdlist)


def _run(cmdlist):
    '''
    Run the command and block until it returns. Failures are re-raised as
    ExternalToolFailure so callers can stop the remaining units.
    '''
    logger.info('Running: %s' % shlex.join(cmdlist))
    try:
        subprocess.run(cmdlist, check=True)
    except subprocess.CalledProcessError as e:
        raise ExternalToolFailure(shlex.join(cmdlist), e.returncode) from e
    except FileNotFoundError as e:
        raise ExternalToolFailure(shlex.join(cmdlist)) from e


class PackemsPacker:
    '''
    The packems/unpackems pair behind a `pack`/`unpack` interface. The
    orchestration only talks to this interface, so tests can swap in an
    object that records the calls instead.
    '''
    def __init__(self, packems_exe=None, unpackems_exe=None):
        self.packems_exe = packems_exe or config.PACKARC_PACKEMS_EXE
        self.unpackems_exe = unpackems_exe or config.PACKARC_UNPACKEMS_EXE

    def __repr__(self):
        return f'{self.__class__.__name__}("{self.packems_exe}", "{self.unpackems_exe}")'

    def pack_command(self, target_size, max_size, staging_dir, archive_dir, prefix, source_dir):
        return Packems(
            source_directory=source_dir,
            pack_directory=staging_dir,
            archive_directory=archive_dir,
            prefix=prefix,
            target_size=target_size,
            max_size=max_size,
            executable_filepath=self.packems_exe,
        )

    def unpack_command(self, destination_dir, staging_dir):
        return Unpackems(
            destination=destination_dir,
            pack_directory=staging_dir,
            executable_filepath=self.unpackems_exe,
        )

    def pack(self, target_size, max_size, staging_dir, archive_dir, prefix, source_dir):
        self.pack_command(target_size, max_size, staging_dir, archive_dir, prefix, source_dir).run()

    def unpack(self, destination_dir, staging_dir):
        self.unpack_command(destination_dir, staging_dir).run()
