"""Centralized constants for the ThreatMetrix nodes."""


# ===== REMOTE SERVICE =====
class ServiceConstants:
    SESSION_QUERY_URI = "https://h-api.online-metrix.net/api/session-query"
    UPDATE_URI = "https://h-api.online-metrix.net/api/update"
    PROFILER_URI = "https://h.online-metrix.net/fp/yshd"
    OUTPUT_FORMAT_PARAM = "output_format"
    OUTPUT_FORMAT = "json"
    FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
    REQUEST_TIMEOUT_SECONDS = 10.0
    UPDATE_WORKERS = 2
    DEFAULT_POLICY = "default"


# ===== FORM FIELDS =====
class FormFields:
    ORG_ID = "org_id"
    API_KEY = "api_key"
    SESSION_ID = "session_id"
    SERVICE_TYPE = "service_type"
    EVENT_TYPE = "event_type"
    POLICY = "policy"
    REQUEST_ID = "request_id"
    ACTION = "action"
    FINAL_REVIEW_STATUS = "final_review_status"
    NOTES = "notes"
    TAG_NAME = "tag_name"
    TAG_CONTEXT = "tag_context"
    LINE_OF_BUSINESS = "line_of_business"
    UPDATE_REVIEW_STATUS = "update_review_status"


# ===== RESPONSE FIELDS =====
class ResponseFields:
    REQUEST_ID = "request_id"
    POLICY_SCORE = "policy_score"
    REVIEW_STATUS = "review_status"
    REASON_CODE = "reason_code"


# ===== PROFILER =====
class ProfilerConstants:
    HIDDEN_VALUE_ID = "ThreatMetrix Session ID"
    CLIENT_SESSION_ID_PATTERN = r"[A-Za-z0-9_-]{1,128}"
