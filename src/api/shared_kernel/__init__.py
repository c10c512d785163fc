"""Shared Kernel module.

Components shared by every bounded context: authorization primitives
and the observation context carried by domain probes. Changes here
affect all contexts.
"""
