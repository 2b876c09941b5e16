"""Themed UI components that render to HTML: layout, tree view, forms, loaders and widgets."""

__version__ = "0.1.0"