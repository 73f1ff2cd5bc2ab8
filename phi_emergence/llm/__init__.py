"""
llm/ — LLM Provider Adapters

Modules:
    base.py             - LLMProvider protocol, Completion, ProviderStats
    passthrough.py      - Echo provider (prompt handed to an outer host)
    ollama.py           - Local inference through Ollama
    openai_provider.py  - OpenAI chat completions
    judgment.py         - judge() + φ-capped reply parsing
    factory.py          - Provider selection / auto-detection
"""
