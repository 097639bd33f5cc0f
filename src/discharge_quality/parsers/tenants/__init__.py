"""Tenant document conventions.

Each sub-package ships a ``__tenant__.py`` manifest exposing ``parser`` (a
``ParserManifest``); :meth:`ParserRegistry.auto_discover` picks them up.
"""
