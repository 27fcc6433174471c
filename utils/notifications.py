"""
Notifications Module - Contact relay emails and owner Telegram pings
"""

import email.errors
import smtplib
import threading
import requests
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from email.utils import formataddr
from flask import current_app
from markupsafe import escape
from .data import PROFILE
from .helpers import nl2br, truncate_text


def get_mail_config():
    """Load SMTP relay settings from the app config"""
    return {
        'host': current_app.config.get('SMTP_HOST', ''),
        'port': current_app.config.get('SMTP_PORT', 587),
        'user': current_app.config.get('SMTP_USER'),
        'password': current_app.config.get('SMTP_PASS'),
        'timeout': current_app.config.get('SMTP_TIMEOUT', 15),
        'from_email': current_app.config.get('FROM_EMAIL'),
        'to_email': current_app.config.get('TO_EMAIL'),
        'suppress': current_app.config.get('MAIL_SUPPRESS_SEND', False)
    }


def get_owner_notifications_config():
    """Load owner Telegram settings from the app config"""
    return {
        'bot_token': current_app.config.get('OWNER_TELEGRAM_BOT_TOKEN') or '',
        'chat_id': current_app.config.get('OWNER_TELEGRAM_CHAT_ID') or ''
    }


def build_owner_email(submission, mail_config):
    """
    Build the notification email sent to the site owner

    Args:
        submission (ContactSubmission): Validated form data
        mail_config (dict): Output of get_mail_config()

    Returns:
        MIMEMultipart: Message addressed to the owner, Reply-To set to the visitor
    """
    msg = MIMEMultipart('alternative')
    msg['Subject'] = f"Portfolio Contact: {submission.subject}"
    msg['From'] = mail_config['from_email']
    msg['To'] = mail_config['to_email']
    msg['Reply-To'] = formataddr((submission.full_name, submission.email))

    html = (
        "<h2>New Contact Form Submission</h2>"
        f"<p><strong>Name:</strong> {escape(submission.full_name)}</p>"
        f"<p><strong>Email:</strong> {escape(submission.email)}</p>"
        f"<p><strong>Subject:</strong> {escape(submission.subject)}</p>"
        "<p><strong>Message:</strong></p>"
        f"<p>{nl2br(submission.message)}</p>"
    )
    text = (
        f"Name: {submission.full_name}\n"
        f"Email: {submission.email}\n"
        f"Subject: {submission.subject}\n\n"
        f"{submission.message}"
    )
    msg.attach(MIMEText(text, 'plain'))
    msg.attach(MIMEText(html, 'html'))
    return msg


def build_auto_reply(submission, mail_config):
    """Build the acknowledgement email sent back to the visitor"""
    owner_name = PROFILE['name']

    msg = MIMEMultipart('alternative')
    msg['Subject'] = "Thanks for reaching out!"
    msg['From'] = mail_config['from_email']
    msg['To'] = submission.email

    html = (
        "<h2>Thank you for your message!</h2>"
        f"<p>Hi {escape(submission.first_name)},</p>"
        "<p>Thank you for reaching out through my portfolio. I've received your message "
        "and will get back to you as soon as possible.</p>"
        f"<p>Best regards,<br>{escape(owner_name)}</p>"
    )
    text = (
        f"Hi {submission.first_name},\n\n"
        "Thank you for reaching out through my portfolio. I've received your message "
        "and will get back to you as soon as possible.\n\n"
        f"Best regards,\n{owner_name}"
    )
    msg.attach(MIMEText(text, 'plain'))
    msg.attach(MIMEText(html, 'html'))
    return msg


def send_contact_emails(submission):
    """
    Relay a contact submission: notify the owner and auto-reply to the visitor

    Both messages go out over a single SMTP session. No retry is attempted.

    Args:
        submission (ContactSubmission): Validated form data

    Returns:
        tuple: (success, error) where error is the failure text or None
    """
    mail_config = get_mail_config()

    try:
        messages = [
            build_owner_email(submission, mail_config),
            build_auto_reply(submission, mail_config),
        ]

        if mail_config['suppress']:
            for msg in messages:
                # Flatten anyway so malformed headers fail the same way as a real send
                msg.as_bytes()
                current_app.logger.info(
                    f"MAIL_SUPPRESS_SEND: would send '{msg['Subject']}' to {msg['To']}")
            return True, None

        with smtplib.SMTP(mail_config['host'], int(mail_config['port']),
                          timeout=mail_config['timeout']) as server:
            server.starttls()
            if mail_config['user'] and mail_config['password']:
                server.login(mail_config['user'], mail_config['password'])
            for msg in messages:
                server.send_message(msg)

        current_app.logger.info(
            f"Contact emails sent for {submission.email} via {mail_config['host']}")
        return True, None
    except (smtplib.SMTPException, OSError, email.errors.MessageError) as e:
        current_app.logger.error(f"Error sending contact emails for {submission.email}: {str(e)}")
        return False, str(e)


def send_owner_notification(subject, message_text):
    """
    Ping the site owner on Telegram in the background

    Delivery is best effort: failures are logged and never reach the caller.

    Args:
        subject (str): Notification subject
        message_text (str): Notification body
    """
    config = get_owner_notifications_config()
    tg_token = config['bot_token']
    tg_chat = config['chat_id']
    if not (tg_token and tg_chat):
        current_app.logger.debug("Owner Telegram credentials not configured")
        return

    logger = current_app.logger
    url = f"https://api.telegram.org/bot{tg_token}/sendMessage"
    payload = {
        'chat_id': tg_chat,
        'text': f"💼 <b>[Portfolio]</b>\n📌 <b>{escape(subject)}</b>\n\n{escape(message_text)}",
        'parse_mode': 'HTML'
    }

    def _send():
        try:
            response = requests.post(url, json=payload, timeout=10)
            if response.status_code == 200:
                logger.info("Owner Telegram notification sent")
            else:
                logger.error(f"Telegram API error: {response.status_code}")
        except requests.RequestException as e:
            logger.error(f"Owner Telegram Error: {str(e)}")

    thread = threading.Thread(target=_send)
    thread.daemon = True
    thread.start()


def notify_owner_of_submission(submission):
    """Send the owner a short Telegram summary of a relayed message"""
    send_owner_notification(
        'New Portfolio Message',
        f"👤 From: {submission.full_name}\n"
        f"📧 Email: {submission.email}\n"
        f"📝 Subject: {submission.subject}\n"
        f"💬 Message:\n{truncate_text(submission.message, 300)}"
    )


__all__ = [
    'get_mail_config',
    'get_owner_notifications_config',
    'build_owner_email',
    'build_auto_reply',
    'send_contact_emails',
    'send_owner_notification',
    'notify_owner_of_submission'
]
