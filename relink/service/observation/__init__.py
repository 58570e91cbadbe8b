from .specificity import is_specific_enough

__all__ = ["is_specific_enough"]
