'''
Errors raised while archiving to or retrieving from tape.

Every message printed for these carries a fixed prefix (ERROR:, WARNING:,
[DRY RUN] Note:) so batch logs can be grepped by severity.
'''


class ConfigurationError(ValueError):
    '''
    The configuration cannot work: the source root is missing, or none of the
    requested subdirectories exist. Raised before anything is dispatched.

    Parameters
    ----------
    problems : list of str
        All problems found, not just the first one.
    '''
    def __init__(self, problems):
        self.problems = list(problems)
        super().__init__('; '.join(self.problems))


class MissingUnitWarning(UserWarning):
    '''
    A named subdirectory disappeared between validation and dispatch. Only
    that unit is skipped.
    '''


class ExternalToolFailure(RuntimeError):
    '''
    packems or unpackems exited non-zero (or could not be started). The
    remaining units are not processed.
    '''
    def __init__(self, cmd, returncode=None):
        self.cmd = cmd
        self.returncode = returncode
        if returncode is None:
            msg = f'Could not run: {cmd}'
        else:
            msg = f'Command failed with exit code {returncode}: {cmd}'
        super().__init__(msg)


class MissingManifestNotice(UserWarning):
    '''
    No INDEX.txt in the staging directory during a dry-run preview.
    Informational only.
    '''
