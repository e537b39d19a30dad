# ovp_builder/core/__init__.py
