"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Login does not issue real credentials; every successful login gets this token.
PLACEHOLDER_TOKEN = "mock-jwt-token"

EMPLOYEES_COLLECTION = "employees"
LEAVES_COLLECTION = "leaves"
PAYROLLS_COLLECTION = "payrolls"
JOB_POSTINGS_COLLECTION = "job_postings"
APPLICATIONS_COLLECTION = "applications"
PERFORMANCES_COLLECTION = "performances"
USERS_COLLECTION = "users"

ALL_COLLECTIONS = (
    EMPLOYEES_COLLECTION,
    LEAVES_COLLECTION,
    PAYROLLS_COLLECTION,
    JOB_POSTINGS_COLLECTION,
    APPLICATIONS_COLLECTION,
    PERFORMANCES_COLLECTION,
    USERS_COLLECTION,
)
