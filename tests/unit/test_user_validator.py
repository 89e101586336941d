"""
Unit tests for app.application.validators.user_validator
"""
import pytest
from app.application.dto.user_dto import CreateUserRequest, UpdateUserRequest
from app.application.validators.user_validator import UserValidator, ValidationResult
from app.domain.models.user import User


def _create(name, email) -> CreateUserRequest:
    return CreateUserRequest(name=name, email=email)


class TestValidationResult:
    """Tests for ValidationResult"""

    def test_valid_when_no_errors(self):
        result = ValidationResult.from_errors([])
        assert result.valid is True
        assert result.errors == ()

    def test_invalid_keeps_order(self):
        result = ValidationResult.from_errors(["first", "second"])
        assert result.valid is False
        assert result.errors == ("first", "second")
        assert result.errors_as_string() == "first; second"

    def test_is_immutable(self):
        result = ValidationResult.from_errors(["oops"])
        with pytest.raises(AttributeError):
            result.valid = True


class TestNullRequest:
    def test_null_create_request_short_circuits(self, user_validator):
        result = user_validator.validate_for_create(None)
        assert result.valid is False
        assert result.errors == ("User request cannot be null",)

    def test_null_update_request_short_circuits(self, user_validator):
        result = user_validator.validate_for_update(None)
        assert result.errors == ("User request cannot be null",)


class TestNameRules:
    """Tests for the name rules"""

    @pytest.mark.parametrize("name", [None, "", "    "])
    def test_name_required(self, user_validator, name):
        result = user_validator.validate_for_create(_create(name, "john@example.com"))
        assert result.errors == ("Name is required",)

    def test_name_too_short(self, user_validator):
        result = user_validator.validate_for_create(_create("J", "a@b.co"))
        assert result.valid is False
        assert "Name must be at least 2 characters long" in result.errors

    def test_name_length_measured_after_trimming(self, user_validator):
        result = user_validator.validate_for_create(_create("  J  ", "john@example.com"))
        assert "Name must be at least 2 characters long" in result.errors

    def test_name_too_long(self, user_validator):
        result = user_validator.validate_for_create(_create("a" * 101, "john@example.com"))
        assert result.errors == ("Name must not exceed 100 characters",)

    def test_name_at_length_limits_is_valid(self, user_validator):
        assert user_validator.validate_for_create(_create("Al", "al@example.com")).valid
        assert user_validator.validate_for_create(_create("a" * 100, "al@example.com")).valid

    @pytest.mark.parametrize("name", ["John3", "John_Doe", "O'Brien", "John-Doe"])
    def test_name_with_non_letters_rejected(self, user_validator, name):
        result = user_validator.validate_for_create(_create(name, "john@example.com"))
        assert "Name must contain only letters and spaces" in result.errors

    @pytest.mark.parametrize(
        "name",
        ["John\x1fDoe", "John\xa0Doe", "John\u2003Doe", "Jo\x1c\x1d", "\xa0John Doe"],
    )
    def test_non_ascii_whitespace_rejected(self, user_validator, name):
        result = user_validator.validate_for_create(_create(name, "john@example.com"))
        assert result.valid is False
        assert "Name must contain only letters and spaces" in result.errors

    def test_tab_counts_as_whitespace(self, user_validator):
        assert user_validator.validate_for_create(_create("John\tDoe", "john@example.com")).valid

    @pytest.mark.parametrize("name", ["José Álvarez", "Zoë Brontë", "François Ñúñez"])
    def test_accented_latin_letters_allowed(self, user_validator, name):
        assert user_validator.validate_for_create(_create(name, "jose@example.com")).valid

    def test_consecutive_spaces_rejected(self, user_validator):
        result = user_validator.validate_for_create(_create("John  Doe", "john@example.com"))
        assert result.errors == ("Name cannot contain consecutive spaces",)

    def test_name_errors_accumulate(self, user_validator):
        result = user_validator.validate_for_create(_create("1", "john@example.com"))
        assert result.errors == (
            "Name must be at least 2 characters long",
            "Name must contain only letters and spaces",
        )


class TestEmailRules:
    """Tests for the email rules"""

    @pytest.mark.parametrize("email", [None, "", "   "])
    def test_email_required(self, user_validator, email):
        result = user_validator.validate_for_create(_create("John Doe", email))
        assert result.errors == ("Email is required",)

    @pytest.mark.parametrize(
        "email",
        ["plainaddress", "john@", "@example.com", "john@example", "john@example.c", "john doe@example.com"],
    )
    def test_invalid_format(self, user_validator, email):
        result = user_validator.validate_for_create(_create("John Doe", email))
        assert "Email format is invalid" in result.errors

    @pytest.mark.parametrize(
        "email",
        ["john@example.com", "John.Doe+tag@Sub.Example.ORG", "  spaced@example.io  ", "a_b%c-d@x-y.co"],
    )
    def test_valid_formats(self, user_validator, email):
        assert user_validator.validate_for_create(_create("John Doe", email)).valid

    def test_email_padded_with_nbsp_is_invalid(self, user_validator):
        result = user_validator.validate_for_create(_create("John Doe", "\xa0john@example.com"))
        assert result.errors == ("Email format is invalid",)

    def test_email_too_long(self, user_validator):
        email = "a" * 250 + "@example.com"
        result = user_validator.validate_for_create(_create("John Doe", email))
        assert "Email must not exceed 254 characters" in result.errors

    @pytest.mark.parametrize(
        "email",
        ["test@10minutemail.com", "TEST@TempMail.org", "someone@guerrillamail.com"],
    )
    def test_disposable_domains_rejected(self, user_validator, email):
        result = user_validator.validate_for_create(_create("John Doe", email))
        assert result.errors == ("Disposable email addresses are not allowed",)

    def test_disposable_match_requires_exact_domain(self, user_validator):
        # Subdomains and look-alike domains are not on the deny-list
        assert user_validator.validate_for_create(_create("John Doe", "x@mail.10minutemail.com")).valid
        assert user_validator.validate_for_create(_create("John Doe", "x@not10minutemail.com")).valid

    def test_custom_deny_list(self):
        validator = UserValidator(disposable_domains=["Throwaway.io"])
        assert validator.validate_for_create(_create("John Doe", "test@10minutemail.com")).valid
        result = validator.validate_for_create(_create("John Doe", "test@throwaway.io"))
        assert result.errors == ("Disposable email addresses are not allowed",)


class TestCombinedRules:
    def test_name_and_email_errors_accumulate(self, user_validator):
        result = user_validator.validate_for_create(_create("J", "bad"))
        assert result.errors == (
            "Name must be at least 2 characters long",
            "Email format is invalid",
        )

    def test_update_uses_same_rules(self, user_validator):
        create_result = user_validator.validate_for_create(CreateUserRequest(name="J", email="x@10minutemail.com"))
        update_result = user_validator.validate_for_update(UpdateUserRequest(name="J", email="x@10minutemail.com"))
        assert create_result == update_result

    @pytest.mark.parametrize(
        "name,email",
        [
            ("John Doe", "john@example.com"),
            ("Al", "a@b.co"),
            ("Élodie Martin", "elodie.martin+news@example.fr"),
            ("a" * 100, "x" * 60 + "@example.com"),
        ],
    )
    def test_accepted_input_always_builds_entity(self, user_validator, name, email):
        assert user_validator.validate_for_create(_create(name, email)).valid
        user = User(name=name, email=email)
        assert user.name == name
