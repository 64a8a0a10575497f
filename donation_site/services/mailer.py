"""Outgoing mail for the contact form."""
from dataclasses import dataclass
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from html import escape
from typing import Optional

import aiosmtplib


class MailerNotConfigured(RuntimeError):
    """SMTP credentials or the receiving mailbox are missing."""


@dataclass
class ContactMessage:
    name: str
    email: str
    message: str
    subject: Optional[str] = None


def build_contact_email(contact: ContactMessage, sender: str, recipient: str) -> MIMEMultipart:
    subject = contact.subject or 'No Subject'
    text = (
        f"Name: {contact.name}\n"
        f"Email: {contact.email}\n"
        f"Subject: {contact.subject or 'N/A'}\n\n"
        f"{contact.message}\n"
    )
    html = f"""
    <div style="font-family: Arial, sans-serif; line-height: 1.6; color: #333;">
      <h2>New Contact Form Submission</h2>
      <p><strong>Name:</strong> {escape(contact.name)}</p>
      <p><strong>Email:</strong> {escape(contact.email)}</p>
      <p><strong>Subject:</strong> {escape(contact.subject or 'N/A')}</p>
      <p><strong>Message:</strong></p>
      <p style="white-space: pre-wrap;">{escape(contact.message)}</p>
    </div>
    """

    message = MIMEMultipart('alternative')
    message['Subject'] = f'New Contact Form Submission: {subject}'
    message['From'] = sender
    message['To'] = recipient
    message['Reply-To'] = contact.email
    message.attach(MIMEText(text, 'plain'))
    message.attach(MIMEText(html, 'html'))
    return message


async def send_contact_message(settings, contact: ContactMessage) -> None:
    """Relay ``contact`` to the configured CONTACT_RECIPIENT over SMTP."""
    sender = settings.get('MAIL_USERNAME')
    recipient = settings.get('CONTACT_RECIPIENT')
    if not sender or not settings.get('MAIL_PASSWORD') or not recipient:
        raise MailerNotConfigured('MAIL_USERNAME, MAIL_PASSWORD and CONTACT_RECIPIENT must be set')

    message = build_contact_email(contact, sender, recipient)
    await aiosmtplib.send(
        message,
        hostname=settings.get('MAIL_HOST'),
        port=settings.get('MAIL_PORT'),
        username=sender,
        password=settings.get('MAIL_PASSWORD'),
        start_tls=settings.get('MAIL_USE_TLS', True),
    )
