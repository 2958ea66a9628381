"""Use-case layer for loading screen data.

Each module coordinates domain objects and ports without knowing about the
view layer, so failures reach view models as ``UseCaseError`` only.
"""
