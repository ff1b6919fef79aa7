"""Small tinkering projects: a text-mode roguelike core, a CSV converter and a threads exercise."""

__version__ = "0.1.0"