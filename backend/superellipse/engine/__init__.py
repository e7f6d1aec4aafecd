"""Superellipse geometry engine. Import the submodules directly."""
