# src/transcript_kit/observability/names.py

"""Standard metric names for transcript-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
Units are handled by the metrics backend (e.g., converted to seconds in Prometheus).
"""

# ============================================================================
# Parsing Metrics
# ============================================================================

# Duration
MARKDOWN_PARSE_DURATION = "markdown_parse_duration"
SUMMARY_PARSE_DURATION = "summary_parse_duration"

# Counters
MARKDOWN_BLOCKS_PARSED = "markdown_blocks_parsed"
SUMMARY_SECTIONS_PARSED = "summary_sections_parsed"


# ============================================================================
# Chunking Metrics
# ============================================================================

# Duration
CHUNKING_DURATION = "chunking_duration"

# Counters (chunks accumulate over time)
CHUNKING_CHUNKS_CREATED = "chunking_chunks_created"


# ============================================================================
# LLM Metrics
# ============================================================================

# Duration
LLM_COMPLETION_DURATION = "llm_completion_duration"

# Counters
LLM_REQUESTS_TOTAL = "llm_requests_total"
LLM_ERRORS_TOTAL = "llm_errors_total"

# Counters (token usage - monotonic over time for cost/rate tracking)
LLM_TOKENS_PROMPT = "llm_tokens_prompt"
LLM_TOKENS_COMPLETION = "llm_tokens_completion"
LLM_TOKENS_TOTAL = "llm_tokens_total"


# ============================================================================
# Summarization Metrics
# ============================================================================

# Duration
SUMMARIZATION_DURATION = "summarization_duration"

# Counters
SUMMARIZATION_REQUESTS_TOTAL = "summarization_requests_total"
SUMMARIZATION_ERRORS_TOTAL = "summarization_errors_total"

# Gauges
SUMMARIZATION_CHUNK_COUNT = "summarization_chunk_count"
