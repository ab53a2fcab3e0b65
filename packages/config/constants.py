DEFAULT_BASE_URL = "https://dashtec.xyz/api"
DEFAULT_USER_AGENT = ("Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
                      "(KHTML, like Gecko) Chrome/124.0 Safari/537.36")
DEFAULT_REFERER = "https://dashtec.xyz/"
DEFAULT_UNIT = "STK"
DEFAULT_ENV_FILE = "configs/.env"
ADDRESS_FILE = "~/.aztec_validator_address"
BYPASS_COOKIE = "cf_clearance"

# endpoint kind -> path template, relative to the API base url
DEFAULT_ENDPOINTS = {
    "network_summary": "/stats/general",
    "validator": "/validators/{address}",
    "slashing": "/validators/slashing-history/{address}",
    "accusations": "/validators/accusations/{address}",
    "leaderboard": "/dashboard/top-validators",
}
