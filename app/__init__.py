"""Crime record persistence package.

The ``app`` package is a regular package so it is never resolved as a
namespace package that could merge with unrelated ``app`` modules on the path.
"""
