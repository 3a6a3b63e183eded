# -*- coding: utf-8 -*-
"""
Simple i18n (internationalization) helper.

We keep it intentionally tiny: a single translation dict + a `t()` function.
Dropdown labels are not translated; they double as result lookup keys.

Doubled braces ({{userfullname}}) survive formatting and reach swiftDialog
as its own placeholders.
"""

from __future__ import annotations

from typing import Any, Dict


LANG_EN = "en"
LANG_ZH = "zh"

_TRANSLATIONS: Dict[str, Dict[str, str]] = {
    LANG_EN: {
        "app_name": "SetDefaultApps",
        "dialog_title": "Default Apps Selection",
        "greeting_morning": "Good morning",
        "greeting_afternoon": "Good afternoon",
        "greeting_evening": "Good evening",
        "dialog_message": (
            "{greeting}, {{userfullname}}.<br><br>{preset_note}"
            "Current default applications for each file type(s) are shown below.  "
            "You can optionally change which applications will be used when you open "
            "the following types of files:"
        ),
        "preset_browser-only": "**Preset:** Browser defaults only<br><br>",
        "preset_email-only": "**Preset:** Email defaults only<br><br>",
        "preset_docs-only": "**Preset:** Document file defaults only<br><br>",
        "infobox": (
            "## System Info ##<br><br>{{computername}}<br>macOS {{osname}} {{osversion}}"
            "<br>{{computermodel}}<br>{{serialnumber}}"
        ),
        "help_message": (
            "**App Usage:** Choose what application(s) you want to open a particular type "
            "of file with dropdown menu(s).<br><br>**Support Info:** Click on the 'More Info' "
            "button for support or scan QR code. Please provide the following information:"
            "<br><br>**User Info:** <br>- **Full Name:** {{userfullname}}<br>"
            "- **User Account Name:** {user}<br>- **User ID:** {uid}<br><br>"
            "**Computer Information:**<br>- **macOS:** {{osversion}} ({{osname}})<br>"
            "- **Computer Name:** {{computername}}<br>- **Serial Number:** {{serialnumber}}"
            "<br><br>**Dialog:** <br>- **Version:** {version}"
        ),
        "btn_ok": "OK",
        "btn_cancel": "Cancel",
        "btn_more_info": "More Info",
        "ntf_title": "Default Apps",
        "ntf_applied": "{n} default app(s) updated.",
        "ntf_partial": "{n} default app(s) updated, {failed} could not be changed.",
        "ntf_failed": "Default apps could not be changed ({failed} failed).",
    },
    LANG_ZH: {
        "app_name": "SetDefaultApps",
        "dialog_title": "默认应用选择",
        "greeting_morning": "早上好",
        "greeting_afternoon": "下午好",
        "greeting_evening": "晚上好",
        "dialog_message": (
            "{greeting}，{{userfullname}}。<br><br>{preset_note}"
            "下方显示了各类文件当前的默认应用。你可以选择打开以下类型文件时使用的应用："
        ),
        "preset_browser-only": "**预设：** 仅浏览器<br><br>",
        "preset_email-only": "**预设：** 仅邮件<br><br>",
        "preset_docs-only": "**预设：** 仅文档文件<br><br>",
        "infobox": (
            "## 系统信息 ##<br><br>{{computername}}<br>macOS {{osname}} {{osversion}}"
            "<br>{{computermodel}}<br>{{serialnumber}}"
        ),
        "help_message": (
            "**使用说明：** 通过下拉菜单选择打开各类文件的应用。<br><br>"
            "**支持信息：** 点击“更多信息”按钮或扫描二维码获取支持，并提供以下信息："
            "<br><br>**用户信息：** <br>- **姓名：** {{userfullname}}<br>"
            "- **账户名：** {user}<br>- **用户 ID：** {uid}<br><br>"
            "**电脑信息：**<br>- **macOS：** {{osversion}} ({{osname}})<br>"
            "- **电脑名称：** {{computername}}<br>- **序列号：** {{serialnumber}}"
            "<br><br>**Dialog：** <br>- **版本：** {version}"
        ),
        "btn_ok": "确定",
        "btn_cancel": "取消",
        "btn_more_info": "更多信息",
        "ntf_title": "默认应用",
        "ntf_applied": "已更新 {n} 个默认应用。",
        "ntf_partial": "已更新 {n} 个默认应用，{failed} 个未能更改。",
        "ntf_failed": "默认应用未能更改（{failed} 个失败）。",
    },
}


def normalize_lang(lang: str) -> str:
    lang = (lang or "").strip().lower()
    if lang.startswith("zh"):
        return LANG_ZH
    return LANG_EN


def t(lang: str, key: str, **kwargs: Any) -> str:
    """
    Translate `key` under `lang`, formatting with kwargs.
    Falls back to English, then to key itself.
    """
    lang_map = _TRANSLATIONS.get(lang) or _TRANSLATIONS[LANG_EN]
    template = lang_map.get(key) or _TRANSLATIONS[LANG_EN].get(key) or key
    try:
        return template.format(**kwargs)
    except (KeyError, IndexError, ValueError):
        return template
