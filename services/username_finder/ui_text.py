"""User-facing strings for the search page, in English and Arabic."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"


@dataclass(frozen=True, slots=True)
class UIText:
    title: str
    subtitle: str
    input_label: str
    input_placeholder: str
    submit_label: str
    idle_prompt: str
    loading: str
    results_heading: str
    no_suggestions: str
    copy_label: str
    copied: str
    right_to_left: bool = False


UI_TEXTS = {
    "en": UIText(
        title="Username Availability Checker",
        subtitle="Find your perfect username with AI",
        input_label="Keyword",
        input_placeholder="Enter a keyword (e.g. game, art, tech)",
        submit_label="Search",
        idle_prompt="Search for unique usernames of 3 to 7 characters.",
        loading="Searching for usernames...",
        results_heading="Available usernames",
        no_suggestions="No suggestions found. Try another keyword.",
        copy_label="Copy",
        copied="Copied!",
    ),
    "ar": UIText(
        title="مدقق إتاحة اليوزرات",
        subtitle="ابحث عن اسم المستخدم المثالي لك باستخدام الذكاء الاصطناعي",
        input_label="كلمة مفتاحية",
        input_placeholder="أدخل كلمة مفتاحية (مثل: game, art, tech)",
        submit_label="بحث",
        idle_prompt="ابحث عن أسماء مستخدمين فريدة من 3 إلى 7 أحرف.",
        loading="جاري البحث عن أسماء مستخدمين...",
        results_heading="أسماء المستخدمين المتاحة",
        no_suggestions="لم يتم العثور على اقتراحات. جرب كلمة مفتاحية أخرى.",
        copy_label="نسخ",
        copied="تم النسخ!",
        right_to_left=True,
    ),
}


def load_ui_text(locale: Optional[str] = None) -> UIText:
    """Return strings for `locale`, or for USERNAME_FINDER_LOCALE when omitted."""

    candidate = (locale or os.getenv("USERNAME_FINDER_LOCALE") or DEFAULT_LOCALE).strip().lower()
    if candidate not in UI_TEXTS:
        logger.warning({"event": "ui_locale_unsupported", "locale": candidate, "fallback": DEFAULT_LOCALE})
        candidate = DEFAULT_LOCALE
    return UI_TEXTS[candidate]
