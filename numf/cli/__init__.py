# numf/cli/__init__.py
