# English feedback messages (built-in defaults).
# Placeholders in braces are filled from the rule's message parameters.

translations = {
    # length
    "length_too_short": "Use at least {min_length} characters.",
    "length_too_long": "Use no more than {max_length} characters.",

    # variety
    "variety_low": "Add more character types: {missing}.",
    "class_lower": "lowercase letters",
    "class_upper": "uppercase letters",
    "class_digit": "digits",
    "class_symbol": "symbols",

    # entropy
    "entropy_low": "Make the password longer or less predictable.",

    # pattern
    "pattern_repeats": "Avoid repeating the same character (like 'aaa').",
    "pattern_sequence": "Avoid sequences like 'abc' or '321'.",
    "pattern_keyboard": "Avoid keyboard patterns like 'qwe' or 'asd'.",

    # dictionary / blacklist
    "common_password": "This is a commonly used password.",
    "blacklisted": "Avoid personal information and forbidden words.",
}
