"""Landing page rendering.

Catalog strings may carry markup (the users online sentence highlights its
counters), so they are inserted as-is while every value coming from settings
or the visitor is escaped.
"""

from html import escape
from typing import Iterable, Optional

from infrastructure.i18n import Translator
from modules.slackin.models import InviteForm

INDEX_PAGE_HTML = """<!DOCTYPE html>
<html lang="{lang}">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>
        body {{
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif;
            color: #1F2937;
            background: #F9FAFB;
            display: flex;
            align-items: center;
            justify-content: center;
            min-height: 100vh;
            margin: 0;
        }}

        main {{
            background: white;
            border-radius: 12px;
            box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1);
            padding: 40px;
            max-width: 420px;
            width: 100%;
            text-align: center;
        }}

        input {{
            display: block;
            width: 100%;
            box-sizing: border-box;
            padding: 12px;
            margin-bottom: 12px;
            border: 1px solid #E5E7EB;
            border-radius: 6px;
        }}

        button {{
            width: 100%;
            padding: 12px;
            background: #E01563;
            color: white;
            border: 0;
            border-radius: 6px;
            font-weight: 600;
            cursor: pointer;
        }}

        .users-online, .users-total {{
            color: #E01563;
        }}

        .notice {{
            color: #047857;
        }}

        .errors {{
            color: #B91C1C;
            text-align: left;
        }}

        .locales a {{
            margin: 0 4px;
        }}
    </style>
</head>
<body>
    <main>
        <h1>{join}</h1>
        <p class="status">{users_online}</p>
        {notice}
        {errors}
        <form method="post" action="/invite?lang={lang}">
            <input type="text" name="username" value="{username}" placeholder="{username_placeholder}" required>
            <input type="email" name="email" value="{email}" placeholder="{email_placeholder}" required>
            <button type="submit">{submit}</button>
        </form>
        <p class="badge"><img src="/badge.svg" alt="Slack"></p>
        <p class="locales">{locales}</p>
    </main>
</body>
</html>
"""


def render_index(
    translator: Translator,
    locale: str,
    team_name: str,
    users_online: str = "",
    notice: Optional[str] = None,
    errors: Iterable[str] = (),
    form: Optional[InviteForm] = None,
    locales: Iterable[str] = (),
) -> str:
    """Render the landing page.

    Args:
        translator: Translator for the page strings.
        locale: Locale the page is rendered in.
        team_name: Workspace name.
        users_online: Pre-rendered users online sentence.
        notice: Confirmation shown after a successful invite.
        errors: Validation or failure messages.
        form: Values to refill the form with.
        locales: Locales offered as language links.

    Returns:
        HTML document.
    """
    form = form or InviteForm()
    error_items = "".join(f"<li>{error}</li>" for error in errors)
    locale_links = " ".join(
        f'<a href="/?lang={escape(code)}">{escape(code)}</a>' for code in locales
    )

    return INDEX_PAGE_HTML.format(
        lang=escape(locale),
        title=escape(team_name or "Slack"),
        join=translator.get("slackin.join", {"team": escape(team_name)}, locale=locale),
        users_online=users_online,
        notice=f'<p class="notice">{notice}</p>' if notice else "",
        errors=f'<ul class="errors">{error_items}</ul>' if error_items else "",
        username=escape(form.username),
        email=escape(form.email),
        username_placeholder=escape(
            translator.get("slackin.placeholders.username", locale=locale)
        ),
        email_placeholder=escape(
            translator.get("slackin.placeholders.email", locale=locale)
        ),
        submit=translator.get("slackin.submit", locale=locale),
        locales=locale_links,
    )
