"""Constants shared by the Jira Cloud mixins."""

API_ROOT = "rest/api/3"

# Field projection requested on every issue search
DEFAULT_SEARCH_FIELDS = ",".join(
    [
        "summary",
        "description",
        "status",
        "priority",
        "assignee",
        "timeoriginalestimate",
        "customfield_10020",
    ]
)

# Issue type used for every issue created through the adapter
DEFAULT_ISSUE_TYPE = "Task"

USER_SEARCH_MAX_RESULTS = 50
