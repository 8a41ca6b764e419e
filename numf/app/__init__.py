# numf/app/__init__.py
