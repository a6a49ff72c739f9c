"""
Core building blocks shared by the extraction pipeline.

- config: environment-driven settings
- errors: error taxonomy carried through pipeline results
- result: Success / Failure result types
- logging_utils: process-wide logging setup
"""
