# policies.py
PREMIUM_ONLY = "premium-only"
METERED = "metered"

# operation class → 과금 분류
OPERATION_CLASSES = {
    "text-generation": METERED,
    "title-generation": METERED,
    "image-generation": PREMIUM_ONLY,
    "background-removal": PREMIUM_ONLY,
    "object-removal": PREMIUM_ONLY,
    "resume-review": PREMIUM_ONLY,
}

# 무료 플랜 누적 한도 (metered 만 카운트, premium 은 무제한)
FREE_USAGE_LIMIT = 10

DENY_PREMIUM_REQUIRED = "premium-required"
DENY_LIMIT_REACHED = "limit-reached"

DENY_MESSAGES = {
    DENY_PREMIUM_REQUIRED: "This feature is only available for premium subscription",
    DENY_LIMIT_REACHED: "Limit reached. Upgrade to continue.",
}
