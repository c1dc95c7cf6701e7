"""Display vocabulary for quote labels, per language."""

MONTH_NAMES: dict[str, list[str]] = {
    "tr": [
        "Ocak", "Şubat", "Mart", "Nisan", "Mayıs", "Haziran",
        "Temmuz", "Ağustos", "Eylül", "Ekim", "Kasım", "Aralık",
    ],
    "en": [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ],
}

# Monday first, matching date.weekday()
WEEKDAY_NAMES: dict[str, list[str]] = {
    "tr": ["Pazartesi", "Salı", "Çarşamba", "Perşembe", "Cuma", "Cumartesi", "Pazar"],
    "en": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"],
}

# Stay length and party summaries
TERMS: dict[str, dict[str, str]] = {
    "tr": {
        "nights_days": "{nights} Gece {days} Gün",
        "adults": "{count} Yetişkin",
        "children": "{count} Çocuk ({ages} Yaş)",
    },
    "en": {
        "nights_days": "{nights} Nights {days} Days",
        "adults": "{count} Adults",
        "children": "{count} Children (Ages {ages})",
    },
}

DEFAULT_LANGUAGE = "tr"
