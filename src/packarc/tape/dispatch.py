'''
Process one work unit: print what would happen (dry-run) or create the
directories it needs and hand it to packems/unpackems (live run).

Units are dispatched one after the other, never concurrently: packems runs
for different units compete for the same tape drives and staging space.
'''

import logging

from packarc.data.base import UnitResult
from packarc.misc import utils
from packarc.misc.errors import MissingManifestNotice, MissingUnitWarning
from packarc.tape import report

logger = logging.getLogger(__name__)

MANIFEST = 'INDEX.txt'
MANIFEST_PREVIEW_LINES = 20


def dispatch_archive(unit, config, packer):
    if not config.whole_tree and not config.dry_run and not unit.source_path.is_dir():
        # Named units are re-checked here; the validator only ensures that
        # at least one of them exists.
        notice = MissingUnitWarning(f'Directory not found, skipping: {unit.source_path}')
        report.warning(notice)
        return UnitResult(unit, 'skipped', [notice])

    report.unit_header(unit, config)

    args = (
        config.packing_target_size,
        config.packing_max_size,
        unit.staging_path,
        unit.remote_path,
        unit.name,
        unit.source_path,
    )

    if config.dry_run:
        command = packer.pack_command(*args)
        report.dry_run(f'Would run: {command.cmd}')
        size = utils.disk_usage(unit.source_path)
        if size is not None:
            report.dry_run(f'Source size: {size}')
        status = 'planned'
    else:
        logger.debug('mkdir -p %s' % unit.staging_path)
        unit.staging_path.mkdir(parents=True, exist_ok=True)
        packer.pack(*args)
        status = 'done'

    report.unit_footer(unit)
    return UnitResult(unit, status, [])


def dispatch_retrieve(unit, config, packer):
    report.unit_header(unit, config)

    notes = []
    if config.dry_run:
        command = packer.unpack_command(unit.source_path, unit.staging_path)
        report.dry_run(f'Would run: {command.cmd}')
        manifest = unit.staging_path / MANIFEST
        if manifest.is_file():
            report.dry_run(f'{MANIFEST} found, listing contents:')
            for line in utils.head(manifest, MANIFEST_PREVIEW_LINES):
                print(line)
        else:
            notice = MissingManifestNotice(f'{MANIFEST} not found at {unit.staging_path}')
            report.dry_run(f'Note: {notice}')
            notes.append(notice)
        status = 'planned'
    else:
        logger.debug('mkdir -p %s' % unit.source_path)
        unit.source_path.mkdir(parents=True, exist_ok=True)
        packer.unpack(unit.source_path, unit.staging_path)
        status = 'done'

    report.unit_footer(unit)
    return UnitResult(unit, status, notes)


_dispatchers = {
    'archive': dispatch_archive,
    'retrieve': dispatch_retrieve,
}


def dispatch(unit, config, packer):
    '''
    Dispatch a single unit according to `config.mode`.

    Raises
    ------
    ExternalToolFailure
        If packems/unpackems fails. Not caught here: the caller stops.
    '''
    return _dispatchers[config.mode](unit, config, packer)


def dispatch_all(units, config, packer):
    '''
    Dispatch `units` in order. The first ExternalToolFailure propagates and
    the remaining units are left alone.

    Returns
    -------
    list of UnitResult
    '''
    results = []
    for unit in units:
        logger.debug('Dispatching %s' % (unit,))
        results.append(dispatch(unit, config, packer))
    return results

# END
