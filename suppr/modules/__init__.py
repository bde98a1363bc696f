"""
Diagnostic modules: kubectl invocation, checks and report rendering.
"""
