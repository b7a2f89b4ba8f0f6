"""Mutation module - in-memory declaration replacement and import insertion."""

from explicate.mutation.ops import MutationDelta, SourceMutator, Splice

__all__ = ["SourceMutator", "MutationDelta", "Splice"]
