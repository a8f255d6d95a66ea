"""Application Layer.

Infrastructure and application services that orchestrate domain logic.
This layer handles terminal output and progress reporting.
"""
