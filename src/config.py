# Data source + consumed contract
# UPCOMING_URL: https://ll.thespacedevs.com/2.2.0/launch/upcoming/?limit=50
# Docs: https://thespacedevs.com/llapi
#
# Fields read from each entry of "results" (all optional):
#   - name                              (str)  card title
#   - net                               (str)  No Earlier Than timestamp
#   - mission.description               (str)  mission line
#   - rocket.configuration.full_name    (str)  preferred rocket name
#   - rocket.configuration.name         (str)  fallback rocket name
#
# Every value below can be overridden from the environment.
import os

LL2_BASE_URL = os.getenv("LL2_BASE_URL", "https://ll.thespacedevs.com/2.2.0").rstrip("/")
LAUNCH_LIMIT = int(os.getenv("LAUNCH_LIMIT", "50"))
FETCH_TIMEOUT = float(os.getenv("LAUNCH_FETCH_TIMEOUT", "30"))
LOG_FILE = os.getenv("LAUNCH_FINDER_LOG_FILE", "logs/launch_finder.log")

UPCOMING_URL = f"{LL2_BASE_URL}/launch/upcoming/?limit={LAUNCH_LIMIT}"

# Render fallbacks
UNKNOWN_LAUNCH = "Unknown Launch"
UNKNOWN_NET = "Unknown Date/Time"
NO_MISSION = "No mission details"
NO_RESULTS_MESSAGE = "No upcoming launches found."
FETCH_FAILED_MESSAGE = "Failed to fetch launches. Please try again later."
ALL_ROCKETS_LABEL = "-- All Rockets --"
