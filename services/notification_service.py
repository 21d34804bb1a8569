import secrets
import smtplib
from email.message import EmailMessage
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from env import EMAIL_FROM, EMAIL_HOST, EMAIL_PASS, EMAIL_PORT, EMAIL_USER
from logger_manager import log_error, log_info
from utils.exceptions import AppError

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(["html"]),
)


def generate_verification_code() -> str:
    return f"{secrets.randbelow(1000000):06d}"


def render_verification_email(code: str) -> str:
    return templates.get_template("verification_email.html").render(code=code)


def send_verification_code(email: str, code: str):
    log_info(f"Sending verification code to {email}")
    message = EmailMessage()
    message["Subject"] = "Email Verification"
    message["From"] = f'"NoReply" <{EMAIL_FROM}>'
    message["To"] = email
    message.set_content(f"Your verification code is {code}")
    message.add_alternative(render_verification_email(code), subtype="html")

    try:
        with smtplib.SMTP(EMAIL_HOST, EMAIL_PORT) as smtp:
            smtp.starttls()
            if EMAIL_USER and EMAIL_PASS:
                smtp.login(EMAIL_USER, EMAIL_PASS)
            smtp.send_message(message)
    except (smtplib.SMTPException, OSError) as e:
        log_error(f"Error sending email to {email}: {str(e)}", e)
        raise AppError("Error sending email")
    log_info(f"Email sent to {email}")
