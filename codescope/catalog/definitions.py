"""
Catalog definitions for code generation models.

Each live entry contains:
- id: Stable catalog identifier
- name: Human-readable model name
- modelId: Hugging Face repository used for inference
- contextWindow: Maximum context length in tokens

Static entries carry published benchmark scores instead of an inference
target. Scores are pass@1 percentages as reported by the linked source.
"""

from typing import List, Dict, Any

# =============================================================================
# Live Models (Hugging Face Inference API)
# =============================================================================

LIVE_MODELS: List[Dict[str, Any]] = [
    {
        "id": "qwen2.5-coder-7b",
        "name": "Qwen2.5 Coder 7B Instruct",
        "type": "live",
        "provider": "huggingface",
        "modelId": "Qwen/Qwen2.5-Coder-7B-Instruct",
        "description": "Alibaba's code-specialised Qwen2.5 model tuned for instruction following.",
        "contextWindow": 32768,
        "tags": ["code", "instruct", "open-weights"],
    },
    {
        "id": "starcoder2-15b",
        "name": "StarCoder2 15B",
        "type": "live",
        "provider": "huggingface",
        "modelId": "bigcode/starcoder2-15b",
        "description": "BigCode's StarCoder2 trained on The Stack v2 across 600+ languages.",
        "contextWindow": 16384,
        "tags": ["code", "completion", "open-weights"],
    },
    {
        "id": "deepseek-coder-6.7b",
        "name": "DeepSeek Coder 6.7B Instruct",
        "type": "live",
        "provider": "huggingface",
        "modelId": "deepseek-ai/deepseek-coder-6.7b-instruct",
        "description": "DeepSeek Coder instruction model trained on 2T tokens of code and text.",
        "contextWindow": 16384,
        "tags": ["code", "instruct", "open-weights"],
    },
    {
        "id": "codellama-7b",
        "name": "Code Llama 7B Instruct",
        "type": "live",
        "provider": "huggingface",
        "modelId": "codellama/CodeLlama-7b-Instruct-hf",
        "description": "Meta's Code Llama instruction-tuned variant.",
        "contextWindow": 16384,
        "tags": ["code", "instruct", "llama"],
    },
]

# =============================================================================
# Static Benchmarks
# =============================================================================

STATIC_BENCHMARKS: List[Dict[str, Any]] = [
    {
        "id": "gpt-4o",
        "name": "GPT-4o",
        "type": "static",
        "provider": "openai",
        "benchmarkUrl": "https://openai.com/index/hello-gpt-4o/",
        "description": "OpenAI's flagship multimodal model.",
        "benchmarks": {"humanEval": 90.2, "mbpp": 87.8},
        "contextWindow": 128000,
        "tags": ["proprietary", "multimodal"],
    },
    {
        "id": "claude-3.5-sonnet",
        "name": "Claude 3.5 Sonnet",
        "type": "static",
        "provider": "anthropic",
        "benchmarkUrl": "https://www.anthropic.com/news/claude-3-5-sonnet",
        "description": "Anthropic's mid-tier Claude 3.5 model.",
        "benchmarks": {"humanEval": 92.0, "gsm8k": 96.4},
        "contextWindow": 200000,
        "tags": ["proprietary"],
    },
    {
        "id": "gemini-1.5-pro",
        "name": "Gemini 1.5 Pro",
        "type": "static",
        "provider": "google",
        "benchmarkUrl": "https://deepmind.google/technologies/gemini/pro/",
        "description": "Google's long-context Gemini model.",
        "benchmarks": {"humanEval": 84.1, "mbpp": 74.6, "gsm8k": 90.8},
        "contextWindow": 2000000,
        "tags": ["proprietary", "long-context"],
    },
    {
        "id": "deepseek-coder-v2",
        "name": "DeepSeek Coder V2 Instruct",
        "type": "static",
        "provider": "deepseek",
        "benchmarkUrl": "https://github.com/deepseek-ai/DeepSeek-Coder-V2",
        "description": "236B mixture-of-experts code model.",
        "benchmarks": {"humanEval": 90.2, "mbpp": 76.2, "gsm8k": 94.9},
        "contextWindow": 128000,
        "tags": ["open-weights", "moe"],
    },
]

MODELS: List[Dict[str, Any]] = LIVE_MODELS + STATIC_BENCHMARKS


def get_all_definitions() -> List[Dict[str, Any]]:
    """Get all catalog records."""
    return MODELS.copy()
