from inbox_api.db.mail_source import (
    JsonFileMailSource,
    MailSource,
    StaticMailSource,
    get_mail_source,
    load_mail_source,
)

__all__ = ["JsonFileMailSource", "MailSource", "StaticMailSource", "get_mail_source", "load_mail_source"]
