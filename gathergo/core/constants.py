"""Global constants for the gathergo application."""

# Collection names
USERS_COLLECTION = "users"
GROUPS_COLLECTION = "groups"

# Group fields
GROUP_MEMBER_IDS = "memberIds"
GROUP_INVITED_EMAILS = "invitedEmails"

# Group statuses
STATUS_PLANNING = "planning"
STATUS_FINALIZED = "finalized"

# Rating bounds
MIN_STARS = 1
MAX_STARS = 5

DEFAULT_EVENT_EMOJI = "\U0001f389"
