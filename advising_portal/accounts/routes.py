# advising_portal/accounts/routes.py
from flask import Blueprint, current_app, jsonify, render_template, request
from flask_login import login_user
from advising_portal.logging_config import setup_logging
from advising_portal.accounts import views
from advising_portal.accounts.errors import AccountError, NotFoundError, NotifyError, ValidationError


user_bp = Blueprint('user', __name__)

# Setup logging
logger = setup_logging()


@user_bp.errorhandler(AccountError)
def handle_account_error(error):
    logger.warning(f"{request.method} {request.path} failed with {error.status_code}: {error.message}")
    return jsonify({'status': error.status_code, 'message': error.message}), error.status_code


def _json_body():
    return request.get_json(silent=True) or {}


@user_bp.route('/register', methods=['POST'])
def register():
    data = _json_body()
    try:
        views.register_account(
            data.get('firstName'),
            data.get('lastName'),
            data.get('email'),
            data.get('password'),
        )
    except NotifyError:
        # The account is stored; only the verification email is in doubt
        return jsonify({
            'status': 500,
            'message': 'Account created, but the verification email could not be sent.',
        }), 500
    except AccountError:
        raise
    except Exception as e:
        logger.error(f"Error during registration: {e}")
        return jsonify({'status': 500, 'message': 'An error occurred during registration.'}), 500

    return jsonify({
        'status': 201,
        'message': 'User registered successfully! Please verify your email.',
    }), 201


@user_bp.route('/verify-email', methods=['GET'])
def verify_email():
    """Landing page for the link in the verification email."""
    try:
        views.verify_email(request.args.get('token'))
    except (ValidationError, NotFoundError) as e:
        return render_template('verification_failed.html', message=e.message), 400
    except AccountError as e:
        return render_template('verification_failed.html', message=e.message), e.status_code
    except Exception as e:
        logger.error(f"Error during email verification: {e}")
        return render_template('verification_failed.html',
                               message='An error occurred during verification.'), 500

    return render_template('email_verified.html', signin_url=current_app.config['CLIENT_SIGNIN_URL'])


@user_bp.route('/signin', methods=['POST'])
def signin():
    data = _json_body()
    try:
        email = views.sign_in(data.get('email'), data.get('password'))
    except NotifyError:
        return jsonify({'status': 500, 'message': 'Could not send the OTP email. Please try again.'}), 500
    except AccountError:
        raise
    except Exception as e:
        logger.error(f"Error during sign-in: {e}")
        return jsonify({'status': 500, 'message': 'An error occurred during sign-in.'}), 500

    return jsonify({
        'status': 200,
        'message': 'OTP sent to email. Please verify.',
        'email': email,
    }), 200


@user_bp.route('/verify-otp', methods=['POST'])
def verify_otp():
    data = _json_body()
    try:
        account = views.confirm_otp(data.get('email'), data.get('otp'))
    except AccountError:
        raise
    except Exception as e:
        logger.error(f"Error during OTP verification: {e}")
        return jsonify({'status': 500, 'message': 'An error occurred during OTP verification.'}), 500

    login_user(account)
    return jsonify({'status': 200, 'message': 'OTP verified successfully'}), 200


@user_bp.route('/forgot-password', methods=['POST'])
def forgot_password():
    data = _json_body()
    try:
        views.request_password_reset(data.get('email'))
    except AccountError:
        raise
    except Exception as e:
        logger.error(f"Error during forgot password: {e}")
        return jsonify({'status': 500, 'message': 'An error occurred while sending the reset email.'}), 500

    return jsonify({'status': 200, 'message': 'Password reset email sent!'}), 200


@user_bp.route('/reset-password', methods=['POST'])
def reset_password():
    data = _json_body()
    try:
        views.reset_password(data.get('email'), data.get('newPassword'))
    except AccountError:
        raise
    except Exception as e:
        logger.error(f"Error during password reset: {e}")
        return jsonify({'status': 500, 'message': 'An error occurred during password reset.'}), 500

    return jsonify({'status': 200, 'message': 'Password updated successfully!'}), 200


@user_bp.route('/profile', methods=['GET'])
def get_profile():
    try:
        profile = views.get_profile(request.args.get('email'))
    except AccountError:
        raise
    except Exception as e:
        logger.error(f"Error fetching user profile: {e}")
        return jsonify({'status': 500, 'message': 'An error occurred while fetching user profile.'}), 500

    return jsonify({'status': 200, 'message': 'Profile fetched successfully.', **profile}), 200


@user_bp.route('/update-profile', methods=['PUT'])
def update_profile():
    data = _json_body()
    try:
        views.update_profile(
            data.get('email'),
            first_name=data.get('firstName'),
            last_name=data.get('lastName'),
            password=data.get('password'),
        )
    except AccountError:
        raise
    except Exception as e:
        logger.error(f"Error updating user profile: {e}")
        return jsonify({'status': 500, 'message': 'An error occurred while updating the profile.'}), 500

    return jsonify({'status': 200, 'message': 'Profile updated successfully!'}), 200
