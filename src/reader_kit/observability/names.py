# src/reader_kit/observability/names.py

"""Standard metric names for reader-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
Units are handled by the metrics backend (e.g., converted to seconds in Prometheus).
"""

# ============================================================================
# Segmentation Metrics
# ============================================================================

# Duration
SEGMENT_DURATION = "segment_duration"

# Counters
SEGMENT_CHAPTERS_CREATED = "segment_chapters_created"
SEGMENT_FALLBACK_TOTAL = "segment_fallback_total"
DECODE_ERRORS_TOTAL = "decode_errors_total"


# ============================================================================
# Anchor Metrics
# ============================================================================

# Counters
ANCHORS_RESOLVED_TOTAL = "anchors_resolved_total"
ANCHORS_UNRESOLVED_TOTAL = "anchors_unresolved_total"


# ============================================================================
# Selection Bridge Metrics
# ============================================================================

# Counters
BOOKMARKS_CREATED_TOTAL = "bookmarks_created_total"
SELECTIONS_UNANCHORABLE_TOTAL = "selections_unanchorable_total"


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
# Assistant Metrics
# ============================================================================

# Counters
ASSISTANT_ACTIONS_TOTAL = "assistant_actions_total"
ASSISTANT_ERRORS_TOTAL = "assistant_errors_total"


# ============================================================================
# Book Store Metrics (SQLite)
# ============================================================================

# Duration
SQLITE_UPSERT_DURATION = "sqlite_upsert_duration"
SQLITE_LOAD_DURATION = "sqlite_load_duration"
SQLITE_REMOVE_DURATION = "sqlite_remove_duration"

# Counters
SQLITE_OPERATIONS_TOTAL = "sqlite_operations_total"


# ============================================================================
# Book Writer Metrics
# ============================================================================

# Counters
WRITER_WRITES_TOTAL = "writer_writes_total"
WRITER_ERRORS_TOTAL = "writer_errors_total"

# Gauges
WRITER_QUEUE_DEPTH = "writer_queue_depth"
