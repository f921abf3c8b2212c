import pathlib

from packarc.misc.config import Config


def test_defaults_follow_user_and_project():
    cfg = Config(environ={'USER': 'k202134'})
    assert cfg.PACKARC_PROJECT == 'bb1469'
    assert cfg.PACKARC_SOURCE_BASE == pathlib.Path('/work/bb1469/k202134')
    assert cfg.PACKARC_ARCHIVE_BASE == pathlib.Path('/arch/bb1469/k202134')
    assert cfg.PACKARC_RESTORE_BASE == pathlib.Path('/work/bb1469/k202134_restored')
    assert cfg.PACKARC_STAGING_BASE == pathlib.Path('/scratch/k/k202134/packems_staging')
    assert cfg.PACKARC_DIRS == []
    assert cfg.PACKARC_TAR_TARGET_GB == 100
    assert cfg.PACKARC_TAR_MAX_GB == 110
    assert cfg.PACKARC_MODULES == ['packems']


def test_environment_overrides():
    cfg = Config(environ={
        'USER': 'k202134',
        'PACKARC_PROJECT': 'ab0995',
        'PACKARC_SOURCE_BASE': '/work/ab0995/k202134/runtime/SPIN2',
        'PACKARC_DIRS': 'run_19900101-19991231 log  scripts',
        'PACKARC_TAR_TARGET_GB': '50',
        'PACKARC_TAR_MAX_GB': '55',
    })
    assert cfg.PACKARC_ARCHIVE_BASE == pathlib.Path('/arch/ab0995/k202134')
    assert cfg.PACKARC_RESTORE_BASE == pathlib.Path('/work/ab0995/k202134/runtime/SPIN2_restored')
    assert cfg.PACKARC_DIRS == ['run_19900101-19991231', 'log', 'scripts']
    assert cfg.PACKARC_TAR_TARGET_GB == 50
    assert cfg.PACKARC_TAR_MAX_GB == 55


def test_missing_user():
    cfg = Config(environ={})
    assert cfg.USER == 'unknown'
    assert cfg.PACKARC_STAGING_BASE == pathlib.Path('/scratch/u/unknown/packems_staging')


def test_root_source_base_still_gives_restore_base():
    cfg = Config(environ={'USER': 'k202134', 'PACKARC_SOURCE_BASE': '/'})
    assert cfg.PACKARC_RESTORE_BASE == pathlib.Path('/restored')
