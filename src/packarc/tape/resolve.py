'''
Map a run configuration to the ordered list of units to process.
'''

from packarc.data.base import WorkUnit


def whole_tree_name(config):
    '''
    Name of the single unit used when no subdirectories are given: the last
    component of the work tree (archive) or of the tape tree (retrieve).
    '''
    if config.mode == 'archive':
        return config.base_source.name
    return config.base_destination.name


def resolve(config):
    '''
    Returns
    -------
    list of WorkUnit
        One unit per name in `config.unit_names`, in the given order, or a
        single unit covering the whole tree when no names are given.

    >>> from packarc.data.base import RunConfig
    >>> cfg = RunConfig('archive', '/work/p/u/SPIN2', '/arch/p/u/SPIN2', '/scratch/u/u/staging')
    >>> [(u.name, str(u.staging_path)) for u in resolve(cfg)]
    [('SPIN2', '/scratch/u/u/staging/SPIN2')]
    '''
    if config.whole_tree:
        name = whole_tree_name(config)
        return [
            WorkUnit(
                name=name,
                source_path=config.base_source,
                staging_path=config.base_staging / name,
                remote_path=config.base_destination,
            )
        ]

    units = []
    for name in config.unit_names:
        units.append(
            WorkUnit(
                name=name,
                source_path=config.base_source / name,
                staging_path=config.base_staging / name,
                remote_path=config.base_destination / name,
            )
        )
    return units

# END
