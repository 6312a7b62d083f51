"""Profiler node."""

from tmx_nodes.nodes.profiler.node import ProfilerNode, render_profiler_script
from tmx_nodes.nodes.profiler.schema import ProfilerConfig

__all__ = ["ProfilerNode", "ProfilerConfig", "render_profiler_script"]
