"""
dualcargo - run cargo test/check twice: default features, then all features.
"""
