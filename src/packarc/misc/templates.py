from jinja2 import Environment, DictLoader, StrictUndefined

templates = {}

templates['banner.txt'] = '''
========================================
{% if mode == 'archive' %}
Packems Archive Script
Using packems to bundle files into ~{{ config.packing_target_size }}GB tar balls
{% else %}
Packems Retrieval Script
{% endif %}
Date: {{ date }}
User: {{ config.username }}
{% if config.dry_run %}
MODE: DRY RUN (no changes will be made)
{% endif %}
========================================

Configuration:
{% if mode == 'archive' %}
  Source:      {{ config.base_source }}
  Archive:     {{ config.base_destination }}
  Staging:     {{ config.base_staging }}
  Directories: {{ directories }}
  Tar size:    {{ config.packing_target_size }}GB (max {{ config.packing_max_size }}GB)
{% else %}
  Archive:     {{ config.base_destination }}
  Restore to:  {{ config.base_source }}
  Staging:     {{ config.base_staging }}
  Directories: {{ directories }}
{% endif %}
'''

templates['unit_header.txt'] = '''
----------------------------------------
{% if mode == 'archive' %}
Archiving: {{ unit.name }}
Source: {{ unit.source_path }}
Tar ball staging: {{ unit.staging_path }}
Archive destination: {{ unit.remote_path }}
{% else %}
Retrieving: {{ unit.name }}
Archive: {{ unit.remote_path }}
Tar ball staging: {{ unit.staging_path }}
Restore to: {{ unit.source_path }}
{% endif %}
Started: {{ date }}
----------------------------------------
'''

templates['unit_footer.txt'] = 'Completed: {{ unit.name }} at {{ date }}'

templates['summary.txt'] = '''
========================================
{% if config.dry_run %}
Dry run complete - no changes were made
{% elif mode == 'archive' %}
Archive complete
{% else %}
Retrieval complete
{% endif %}
Date: {{ date }}
========================================

{% if mode == 'archive' %}
Tar balls staged in: {{ config.base_staging }}
Archive location: {{ config.base_destination }}
Each directory has an INDEX.txt listing packed files
{% else %}
Restored data location: {{ config.base_source }}
{% endif %}
'''

environment = Environment(
    loader=DictLoader(templates),
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render(name, **context):
    '''
    Render one of the report templates without its surrounding newlines.
    '''
    return environment.get_template(name).render(**context).strip('\n')

# END
