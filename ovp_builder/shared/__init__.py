# ovp_builder/shared/__init__.py
