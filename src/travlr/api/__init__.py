"""HTTP API layer.

The root router lives in ``travlr.api.router``; it is not re-exported
here so that ``travlr.api.dependencies`` can be imported without
pulling in every route module.
"""
