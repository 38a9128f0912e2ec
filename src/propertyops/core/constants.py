"""Application-wide constants.

Allowed enum values, column lengths and fixed response texts shared by
models, services and tests.
"""

# Tenant statuses
TENANT_STATUSES = ("active", "inactive", "applicant")

# Unit statuses
UNIT_STATUSES = ("occupied", "vacant", "maintenance")

# Maintenance request workflow
REQUEST_STATUSES = ("new", "in_progress", "resolved", "closed")
REQUEST_PRIORITIES = ("low", "medium", "high", "urgent")
DEFAULT_REQUEST_STATUS = "new"

# Payment methods
PAYMENT_METHODS = ("cash", "card", "ach", "check")

# String field lengths
MAX_NAME_LENGTH = 255
MAX_EMAIL_LENGTH = 255
MAX_PHONE_LENGTH = 50
MAX_STATUS_LENGTH = 20
MAX_REFERENCE_LENGTH = 255

# Error response texts
NOT_FOUND_MESSAGE = "Not found"
VALIDATION_FAILED_MESSAGE = "Validation failed"
INTERNAL_ERROR_MESSAGE = "Internal server error"

# UI development host allowed by CORS in development
DEFAULT_UI_ORIGIN = "http://localhost:5173"
