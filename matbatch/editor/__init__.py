"""Editor-side batch tools. Qt widgets are imported from their own modules."""

from matbatch.editor.batch_mutator import BatchMutator, MutationResult
from matbatch.editor.material_mutations import MUTATION_GROUPS, MUTATIONS

__all__ = [
    "BatchMutator",
    "MutationResult",
    "MUTATION_GROUPS",
    "MUTATIONS",
]
