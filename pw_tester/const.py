NAME = "pw-tester"

MIN_LENGTH = 8
SPECIAL_CHARACTERS = "!@#$%^&*()-_+=<>?/"

MASK_CHAR = "*"
ERASE_SEQUENCE = "\b \b"

REASON_TOO_SHORT = f"Password is too short (minimum {MIN_LENGTH} characters required)"
REASON_NO_UPPERCASE = "Missing uppercase letter"
REASON_NO_LOWERCASE = "Missing lowercase letter"
REASON_NO_DIGIT = "Missing digit"
REASON_NO_SPECIAL = f"Missing special character ({SPECIAL_CHARACTERS})"

BANNER = [
    "🧪 Password Strength Tester",
    f"Password must be at least {MIN_LENGTH} characters long and contain:",
    "- At least one uppercase letter",
    "- At least one lowercase letter",
    "- At least one digit",
    f"- At least one special character ({SPECIAL_CHARACTERS})",
]
PROMPT = "Enter password: "
STRONG_VERDICT = "Strong password ✅"
WEAK_VERDICT = "Weak password ❌"
SUCCESS_MESSAGE = "Great! Your password meets all security requirements!"
