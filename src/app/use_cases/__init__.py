"""
Use Cases

Organized by entity kind:
- projects/: project CRUD, lookups and the nested project wrapper
- status_types/: status catalog
- role_types/: project role catalog
- tasks/: task CRUD, task wrapper and child reordering
- team_members/: member CRUD and task assignments
- server/: version and uptime

Import from the subpackages; shared bases live in common.py and views.py.
"""
