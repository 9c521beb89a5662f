from ._merge import marshal, merge_claims

__all__ = ["marshal", "merge_claims"]
