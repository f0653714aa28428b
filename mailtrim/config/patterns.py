"""
Locale pattern catalog — declarative tables behind every line matcher.

Shape:
    {
        matcher_name: {
            locale: [{"regex_pattern": r"...", "ignore_case": bool}, ...],
            ...
        },
        ...
    }

Order matters only for readability: a line is positive for a matcher as soon
as any pattern of any locale matches. Adding a language means adding entries
here, never code.
"""
from typing import Dict, List


def _entry(pattern: str, ignore_case: bool = True) -> dict:
    return {"regex_pattern": pattern, "ignore_case": ignore_case}


def _banner(*phrases: str) -> dict:
    """Forwarded/original-message banner, optionally framed by dashes."""
    return _entry(
        r"^[ \t>]*[-_=* \t]*(?:" + "|".join(phrases) + r")[-_=* \t]*:?[ \t]*$"
    )


def _header(*fields: str) -> dict:
    """Header field name, separator and a non-empty value."""
    return _entry(
        r"^[ \t*]*(?:" + "|".join(fields) + r")[ \t*\u00a0]*[:\uff1a][ \t\u00a0]*\S"
    )


def _short_header(*fields: str) -> dict:
    """
    One- or two-letter header field ("A", "Da", "De", ...), case-sensitive.

    The value must not start with a lowercase letter unless it holds an
    address, so notes such as "Da: lunedi" stay Text.
    """
    return _entry(
        r"^[ \t*]*(?:" + "|".join(fields) + r")[ \t*\u00a0]*[:\uff1a][ \t\u00a0]*"
        r"(?:(?=.*@)|(?![a-zà-ÿ]))\S",
        ignore_case=False,
    )


# Capitalized product word ("BlackBerry", "Outlook", "iPhone", "10")
_PRODUCT_WORD = r"(?:[A-Z0-9À-Þ]|i[A-Z])[\w&'’.+-]*"


def _sent_from(verbs: str, prepositions: str, possessives: str) -> List[dict]:
    """
    Device/app sign-off filling the whole line, in two shapes:
    "<verb> <prep> <possessive> <1-3 words>" and "<verb> <prep> <Product Name>".
    """
    lead = r"^[ \t]*(?i:%s)[ \t]+(?i:%s)[ \t]+" % (verbs, prepositions)
    return [
        _entry(
            lead + r"(?i:%s)[ \t]+(?:[\w'’.+-]+[ \t]*){1,3}[.!]?[ \t]*$" % possessives,
            ignore_case=False,
        ),
        _entry(
            lead
            + _PRODUCT_WORD
            + r"(?:[ \t]+(?:[a-zà-ÿ]{1,4}[ \t]+)?"
            + _PRODUCT_WORD
            + r"){0,4}[ \t]*[.!]?[ \t]*$",
            ignore_case=False,
        ),
    ]


# =============================================================================
# Structural matchers (language independent)
# =============================================================================
EMPTY_PATTERNS: Dict[str, List[dict]] = {
    "any": [
        _entry(r"^\s*$", ignore_case=False),
    ],
}

DELIMITER_PATTERNS: Dict[str, List[dict]] = {
    "any": [
        _entry(r"^\s*(?:_{3,}|-{3,}|={3,}|\*{3,})\s*$", ignore_case=False),
    ],
}

QUOTE_PATTERNS: Dict[str, List[dict]] = {
    "any": [
        _entry(r"^\s*>", ignore_case=False),
    ],
}

# =============================================================================
# Mobile / app signatures ("Sent from my iPhone")
# =============================================================================
SIGNATURE_PATTERNS: Dict[str, List[dict]] = {
    "en": [
        *_sent_from(r"sent", r"from|via|with|using", r"my"),
        _entry(r"^[ \t]*get outlook for (?:ios|android)(?:[ \t]*<[^>\s]*>)?[ \t]*$"),
    ],
    "de": [
        *_sent_from(r"gesendet|verschickt|versendet", r"von|vom|mit|über", r"meinem|meinen"),
        _entry(r"^[ \t]*von meinem (?:[\w'’.+-]+[ \t]+){1,3}(?:gesendet|verschickt|versendet)[.!]?[ \t]*$"),
    ],
    "fr": [
        *_sent_from(r"envoyé", r"de|depuis|avec|via|à partir de", r"mon|ma"),
    ],
    "es": [
        *_sent_from(r"enviado", r"desde|con|a través de", r"mi"),
    ],
    "it": [
        *_sent_from(r"inviato", r"da|dal|dalla|con|tramite", r"il mio|la mia|mio|mia"),
    ],
    "nl": [
        *_sent_from(r"verzonden|verstuurd", r"vanaf|van|met|via", r"mijn"),
    ],
    "pt": [
        *_sent_from(r"enviad[oa]", r"a partir d[oe]|do|da|de|pelo|pela", r"meu|minha"),
    ],
    "sv": [
        *_sent_from(r"skickat", r"från|med|via", r"min|mitt"),
    ],
    "no_da": [
        *_sent_from(r"sendt", r"fra|med|via", r"min|mit|mitt"),
    ],
    "fi": [
        _entry(r"^[ \t]*lähetetty (?:minun )?\S+(?:sta|stä)[.!]?[ \t]*$"),
    ],
    "pl": [
        *_sent_from(r"wysłan[eoa]", r"przy użyciu|za pomocą|ze|z", r"mojego|mojej|moim"),
    ],
    "ru": [
        *_sent_from(r"отправлено", r"с|из|через", r"моего|моей|моём|моем"),
    ],
    "cs": [
        *_sent_from(r"odesláno", r"pomocí|ze|z", r"mého|mé|mém"),
    ],
    "tr": [
        _entry(r"^[ \t]*\S+['’]?(?:umdan|ımdan|imden|umden|ümden) gönderildi[.!]?[ \t]*$"),
    ],
    "ja": [
        _entry(r"^[ \t]*\S+(?:から|より)送信\s*$"),
    ],
    "zh": [
        _entry(r"^[ \t]*(?:发自|發自|来自|來自)我的\s*\S+(?:\s+\S+){0,2}\s*$"),
        _entry(r"^[ \t]*(?:从|從)我的\S+(?:发送|傳送|發送)\s*$"),
    ],
}

# =============================================================================
# Embedded reply markers ("On ... wrote:") and forward banners
# =============================================================================
EMBEDDED_MARKER_PATTERNS: Dict[str, List[dict]] = {
    "en": [
        # Case-sensitive: Gmail puts a lowercase "at" inside the date span
        _entry(
            r"^[ \t]*(?:On|At)\s(?:(?!\b(?:On|At|wrote|writes)\b).)+?\s(?:wrote|writes)\s*:?\s*$",
            ignore_case=False,
        ),
        _entry(r"^[ \t]*[^\s<>]+(?: [^\s<>]+)* <[^\s<>@]+@[^\s<>]+> (?:wrote|writes)\s*:\s*$"),
        _banner(r"begin forwarded message", r"forwarded message", r"original message"),
    ],
    "de": [
        _entry(r"^[ \t]*Am\s.+?\sschrieb(?:en)?\b.*:\s*$"),
        _entry(r"^[ \t]*\S.*?\s(?:hat|haben) am\s.+?\sgeschrieben\s*:\s*$"),
        _banner(
            r"ursprüngliche nachricht",
            r"originalnachricht",
            r"weitergeleitete nachricht",
            r"anfang der weitergeleiteten nachricht",
        ),
    ],
    "fr": [
        _entry(r"^[ \t]*Le\s.+?\sa écrit\s*:\s*$"),
        _banner(
            r"message d['’]origine",
            r"message original",
            r"message initial",
            r"message transféré",
            r"début du message (?:transféré|réexpédié)",
        ),
    ],
    "es": [
        _entry(r"^[ \t]*El\s.+?\sescribió\s*:\s*$"),
        _banner(
            r"mensaje original",
            r"mensaje reenviado",
            r"inicio del mensaje reenviado",
        ),
    ],
    "it": [
        _entry(r"^[ \t]*Il\s.+?\sha scritto\s*:\s*$"),
        _banner(
            r"messaggio originale",
            r"messaggio inoltrato",
            r"inizio messaggio inoltrato",
        ),
    ],
    "nl": [
        _entry(r"^[ \t]*Op\s.+?\sschreef\b.*:\s*$"),
        _banner(
            r"oorspronkelijk bericht",
            r"origineel bericht",
            r"doorgestuurd bericht",
            r"begin doorgestuurd bericht",
        ),
    ],
    "pt": [
        _entry(r"^[ \t]*Em\s.+?\sescreveu\s*:\s*$"),
        _banner(
            r"mensagem original",
            r"mensagem encaminhada",
            r"início da mensagem (?:reencaminhada|encaminhada)",
        ),
    ],
    "sv": [
        _entry(r"^[ \t]*Den\s.+?\sskrev\b.*:\s*$"),
        _banner(
            r"ursprungligt meddelande",
            r"originalmeddelande",
            r"vidarebefordrat meddelande",
            r"början på vidarebefordrat meddelande",
        ),
    ],
    "no_da": [
        _entry(r"^[ \t]*(?:Den|På|D\.)\s.+?\sskrev\b.*:\s*$"),
        _banner(
            r"opprinnelig melding",
            r"videresendt melding",
            r"oprindelig meddelelse",
            r"original meddelelse",
            r"videresendt meddelelse",
        ),
    ],
    "fi": [
        _entry(r"^[ \t]*\S.*?\skirjoitti\s*:\s*$"),
        _banner(r"alkuperäinen viesti", r"välitetty viesti"),
    ],
    "pl": [
        _entry(r"^[ \t]*\S.*?\snapisał(?:a|\(a\))?\s*:\s*$"),
        _banner(
            r"oryginalna wiadomość",
            r"wiadomość oryginalna",
            r"przekazana wiadomość",
            r"początek przekazanej wiadomości",
        ),
    ],
    "ru": [
        _entry(r"^[ \t]*\S.*?\s(?:написал(?:а|\(а\))?|пишет)\s*:\s*$"),
        _banner(
            r"исходное сообщение",
            r"оригинальное сообщение",
            r"пересылаемое сообщение",
            r"переадресованное сообщение",
        ),
    ],
    "cs": [
        _entry(r"^[ \t]*\S.*?\snapsal(?:a|\(a\))?\s*:\s*$"),
        _banner(r"původní zpráva", r"přeposlaná zpráva"),
    ],
    "tr": [
        _entry(r"^[ \t]*\S.*?\sşunu yazdı\s*:\s*$"),
        _banner(r"orijinal mesaj", r"iletilen mesaj", r"özgün ileti"),
    ],
    "ja": [
        _entry(r"^[ \t]*\S.*?のメッセージ\s*[:：]\s*$"),
        _entry(r"^[ \t]*\S.*?(?:は|が)書きました\s*[:：]\s*$"),
        _banner(r"元のメッセージ", r"転送されたメッセージ"),
    ],
    "zh": [
        _entry(r"^[ \t]*\S.*?(?:写道|寫道)\s*[:：]\s*$"),
        _banner(r"原始邮件", r"原始郵件", r"转发的邮件", r"轉寄的郵件"),
    ],
}

# =============================================================================
# Email headers (date-bearing fields first, then name/subject fields)
# =============================================================================
EMAIL_HEADER_PATTERNS: Dict[str, List[dict]] = {
    "en": [
        _header(r"Sent", r"Date"),
        _header(r"From", r"To", r"Cc", r"Bcc", r"Reply-To", r"Subject"),
    ],
    "de": [
        _header(r"Gesendet(?: am)?", r"Datum"),
        _header(r"Von", r"Cc", r"Bcc", r"Kopie", r"Betreff", r"Antwort an"),
        _short_header(r"An"),
    ],
    "fr": [
        _header(r"Envoyé(?: le)?", r"Date"),
        _header(r"Cc", r"Cci", r"Objet", r"Sujet", r"Répondre à"),
        _short_header(r"De", r"À", r"A"),
    ],
    "es": [
        _header(r"Enviado(?: el)?", r"Fecha"),
        _header(r"Para", r"CC", r"CCO", r"Asunto", r"Responder a"),
        _short_header(r"De"),
    ],
    "it": [
        _header(r"Inviato(?: il)?", r"Data"),
        _header(r"Cc", r"Ccn", r"Oggetto", r"Rispondi a"),
        _short_header(r"Da", r"A"),
    ],
    "nl": [
        _header(r"Verzonden(?: op)?", r"Datum"),
        _header(r"Van", r"Aan", r"Cc", r"Bcc", r"Onderwerp", r"Beantwoorden"),
    ],
    "pt": [
        _header(r"Enviad[oa](?: em)?", r"Data"),
        _header(r"Para", r"Cc", r"Cco", r"Assunto", r"Responder a"),
        _short_header(r"De"),
    ],
    "sv": [
        _header(r"Skickat", r"Datum"),
        _header(r"Från", r"Till", r"Kopia", r"Ämne"),
    ],
    "no_da": [
        _header(r"Sendt", r"Dato"),
        _header(r"Fra", r"Til", r"Kopi(?: til)?", r"Emne", r"Svar til"),
    ],
    "fi": [
        _header(r"Lähetetty", r"Päivämäärä"),
        _header(r"Lähettäjä", r"Vastaanottaja", r"Kopio", r"Aihe"),
    ],
    "pl": [
        _header(r"Wysłano", r"Wysłane", r"Data"),
        _header(r"DW", r"UDW", r"Temat"),
        _short_header(r"Od", r"Do"),
    ],
    "ru": [
        _header(r"Отправлено", r"Дата"),
        _header(r"От", r"Кому", r"Копия", r"Тема"),
    ],
    "cs": [
        _header(r"Odesláno", r"Datum"),
        _header(r"Komu", r"Kopie", r"Předmět"),
        _short_header(r"Od"),
    ],
    "tr": [
        _header(r"Gönderildi", r"Gönderilme", r"Tarih"),
        _header(r"Kimden", r"Kime", r"Bilgi", r"Konu"),
    ],
    "ja": [
        _header(r"送信日時", r"日付"),
        _header(r"差出人", r"宛先", r"件名", r"CC"),
    ],
    "zh": [
        _header(r"发送时间", r"傳送時間", r"日期", r"時間"),
        _header(r"发件人", r"收件人", r"抄送", r"主题", r"寄件者", r"收件者", r"副本", r"主旨"),
    ],
}

# =============================================================================
# Full catalog, keyed by matcher name
# =============================================================================
PATTERN_CATALOG: Dict[str, Dict[str, List[dict]]] = {
    "empty": EMPTY_PATTERNS,
    "delimiter": DELIMITER_PATTERNS,
    "signature": SIGNATURE_PATTERNS,
    "embedded_marker": EMBEDDED_MARKER_PATTERNS,
    "email_header": EMAIL_HEADER_PATTERNS,
    "quote": QUOTE_PATTERNS,
}
