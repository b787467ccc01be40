"""Static reference pages (legal and settings help) searched alongside stored content."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReferencePage:
    id: str
    title: str
    content: str
    url: str


LEGAL_PAGES: tuple[ReferencePage, ...] = (
    ReferencePage(
        id="privacy-policy",
        title="Privacy Policy",
        content=(
            "Our Privacy Policy outlines how we collect, use, and protect your personal information.\n"
            "We respect your privacy and are committed to maintaining the confidentiality of your data.\n"
            "This policy explains your rights regarding your information and how you can exercise those rights."
        ),
        url="/legal/privacy",
    ),
    ReferencePage(
        id="terms-of-service",
        title="Terms of Service",
        content=(
            "These Terms of Service govern your use of our platform and services.\n"
            "By accessing or using our platform, you agree to be bound by these terms.\n"
            "If you disagree with any part of the terms, you may not access our services."
        ),
        url="/legal/terms",
    ),
    ReferencePage(
        id="cookie-policy",
        title="Cookie Policy",
        content=(
            "Our Cookie Policy explains how we use cookies and similar technologies on our website.\n"
            "Cookies help us improve your browsing experience, analyze site traffic, and personalize content.\n"
            "You can manage your cookie preferences through your browser settings."
        ),
        url="/legal/cookies",
    ),
    ReferencePage(
        id="copyright",
        title="Copyright Information",
        content=(
            "All content on this platform, including stories, images, and design elements, "
            "is subject to copyright protection.\n"
            "Unauthorized reproduction or distribution is prohibited.\n"
            "For inquiries about using our content, please contact our copyright department."
        ),
        url="/legal/copyright",
    ),
)

SETTINGS_PAGES: tuple[ReferencePage, ...] = (
    ReferencePage(
        id="account-settings",
        title="Account Settings",
        content=(
            "Manage your account preferences, update your profile information, and control your privacy settings.\n"
            "You can change your username, email, and password from this page.\n"
            "Profile visibility and notification preferences can also be adjusted here."
        ),
        url="/settings/account",
    ),
    ReferencePage(
        id="notification-settings",
        title="Notification Settings",
        content=(
            "Control which notifications you receive and how they are delivered.\n"
            "You can choose to be notified about new stories, comments on your posts, and system updates.\n"
            "Email notification frequency can be adjusted to daily, weekly, or disabled entirely."
        ),
        url="/settings/notifications",
    ),
    ReferencePage(
        id="display-settings",
        title="Display Settings",
        content=(
            "Customize your reading experience with display preferences.\n"
            "Adjust font size, line spacing, and color themes for comfortable reading.\n"
            "Dark mode and contrast settings are available for reduced eye strain during nighttime reading."
        ),
        url="/settings/display",
    ),
    ReferencePage(
        id="security-settings",
        title="Security Settings",
        content=(
            "Enhance your account security with additional protection measures.\n"
            "Enable two-factor authentication for an extra layer of security.\n"
            "Review active sessions and sign out from other devices if needed."
        ),
        url="/settings/security",
    ),
)
