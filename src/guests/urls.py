GET_RSVP_URL = "/api/v1/rsvp/{guest_id}"
UPDATE_RSVP_URL = "/api/v1/rsvp/{guest_id}"

SUMMARY_URL = "/api/v1/summary"
GENERATE_TOKEN_URL = "/api/v1/summary/token"
CREATE_GUEST_URL = "/api/v1/summary/guests"
GUEST_DETAIL_URL = "/api/v1/summary/guests/{guest_id}"
EXPORT_GUESTS_URL = "/api/v1/summary/export"
