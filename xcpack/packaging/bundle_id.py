"""
Bundle Identifier - 应用标识符解析

Derives the reverse-domain app identifier (eg. com.company.project) from the
product and company names.
"""
from __future__ import annotations

import logging
import re

from .errors import InvalidIdentifier

logger = logging.getLogger(__name__)

PROJECT_NAME_TOKEN = "${PROJECT_NAME}"
COMPANY_NAME_TOKEN = "${COMPANY_NAME}"

_STRIPPED_CHARS = (" ", ".", "-")
_VALID_IDENTIFIER = re.compile(r"[a-z0-9._]+")


def clean_name(name: str) -> str:
    """去掉空格、点和连字符"""
    for ch in _STRIPPED_CHARS:
        name = name.replace(ch, "")
    return name


def get_app_name(product_name: str) -> str:
    return clean_name(product_name)


def _replace_token(text: str, token: str, value: str) -> str:
    return re.sub(re.escape(token), lambda _m: value, text, flags=re.IGNORECASE)


def resolve_app_identifier(template: str, product_name: str, company_name: str) -> str:
    """
    解析应用标识符

    Args:
        template: 标识符模板，例如 ``com.${COMPANY_NAME}.${PROJECT_NAME}``
        product_name: 产品名称
        company_name: 公司名称

    Returns:
        小写的标识符

    Raises:
        InvalidIdentifier: 结果为空或包含非法字符
    """
    identifier = _replace_token(template, PROJECT_NAME_TOKEN, clean_name(product_name))
    identifier = _replace_token(identifier, COMPANY_NAME_TOKEN, clean_name(company_name))
    identifier = identifier.lower()

    if not identifier:
        raise InvalidIdentifier("Apple app identifier is empty.", identifier=identifier)
    if not _VALID_IDENTIFIER.fullmatch(identifier):
        raise InvalidIdentifier(
            "Apple app identifier contains invalid character. "
            "Only letters, numbers, dots and underscore characters are allowed.",
            identifier=identifier,
        )

    logger.debug("Resolved app identifier %s", identifier)
    return identifier
