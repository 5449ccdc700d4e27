"""
CodeScope - Side-by-side code generation model comparison.

Submits one prompt to up to three hosted code-generation models, collects
their outputs and throughput, and returns a single normalized response.

Key Features:
- Concurrent fan-out to live Hugging Face models with isolated failures
- Single fixed-delay retry for cold-starting models
- Per-client fixed-window rate limiting
- Static benchmark records served alongside live models
"""

__version__ = "0.1.0"
__author__ = "CodeScope Team"
