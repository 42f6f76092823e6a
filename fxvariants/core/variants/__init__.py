from .expander import DefineSet, define_sets_for, expand_levels

__all__ = ["DefineSet", "define_sets_for", "expand_levels"]
