"""
API Routes - Contact relay and resume download
"""

from flask import request, jsonify, url_for, current_app
from sqlalchemy.exc import SQLAlchemyError
from extensions import db
from models import ContactMessage
from utils.decorators import rate_limited
from utils.notifications import send_contact_emails, notify_owner_of_submission
from utils.security import get_client_ip
from utils.validation import validate_contact_payload
from . import api_bp


SUCCESS_MESSAGE = 'Message sent successfully!'
FAILURE_MESSAGE = 'Failed to send message. Please try again.'


def _record_message(submission):
    """Store the submission in the message log; returns the row or None"""
    try:
        record = ContactMessage(
            first_name=submission.first_name,
            last_name=submission.last_name,
            email=submission.email,
            subject=submission.subject,
            message=submission.message,
            ip_address=get_client_ip(),
            status='received'
        )
        db.session.add(record)
        db.session.commit()
        current_app.logger.info(f"Contact message saved to DB, message_id: {record.id}")
        return record
    except SQLAlchemyError as e:
        current_app.logger.error(f"Could not save contact message: {str(e)}")
        db.session.rollback()
        return None


def _update_status(record, status, error=None):
    if record is None:
        return
    try:
        record.status = status
        record.error = error
        db.session.commit()
    except SQLAlchemyError as e:
        current_app.logger.error(f"Could not update contact message {record.id}: {str(e)}")
        db.session.rollback()


@api_bp.route('/contact', methods=['POST'])
@rate_limited('contact')
def contact():
    """Validate a contact form submission and relay it by email"""
    payload = request.get_json(silent=True)

    # Honeypot spam protection
    if isinstance(payload, dict) and payload.get('website'):
        current_app.logger.info(f"Honeypot triggered from {get_client_ip()}")
        return jsonify({'success': True, 'message': SUCCESS_MESSAGE})

    submission, errors = validate_contact_payload(payload)
    if errors:
        current_app.logger.info(f"Contact form rejected: {[e['field'] for e in errors]}")
        return jsonify({
            'success': False,
            'message': 'Validation error',
            'errors': errors
        }), 400

    record = _record_message(submission)

    sent, error = send_contact_emails(submission)
    if not sent:
        _update_status(record, 'failed', error)
        return jsonify({'success': False, 'message': FAILURE_MESSAGE}), 500

    _update_status(record, 'sent')
    notify_owner_of_submission(submission)

    return jsonify({'success': True, 'message': SUCCESS_MESSAGE})


@api_bp.route('/resume/download')
def resume_download():
    """Point the client at the resume file"""
    return jsonify({
        'success': True,
        'message': 'Resume download initiated',
        'downloadUrl': url_for('pages.resume')
    })
