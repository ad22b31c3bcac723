class TestRequestValidator:
    def test_valid_form(self, validator, valid_form):
        is_valid, errors = validator.validate(valid_form)
        assert is_valid is True
        assert errors == []

    def test_optional_fields_may_be_absent(self, validator):
        form = {"activator_call": "JH1ABC/1", "operator": "JH1ABC", "references": "JA-0001"}
        is_valid, _ = validator.validate(form)
        assert is_valid is True

    def test_missing_required_fields(self, validator):
        is_valid, errors = validator.validate({"operator": "JH1ABC"})
        assert is_valid is False
        error_text = " ".join(errors)
        assert "activator_call" in error_text
        assert "references" in error_text

    def test_empty_references_rejected(self, validator, valid_form):
        valid_form["references"] = ""
        is_valid, errors = validator.validate(valid_form)
        assert is_valid is False
        assert len(errors) == 1

    def test_bad_call_sign(self, validator, valid_form):
        valid_form["activator_call"] = "JH1 ABC"
        is_valid, _ = validator.validate(valid_form)
        assert is_valid is False

    def test_stats_tracking(self, validator, valid_form):
        validator.validate(valid_form)
        validator.validate(valid_form)
        validator.validate({})

        stats = validator.get_stats()
        assert stats["total"] == 3
        assert stats["valid"] == 2
        assert stats["invalid"] == 1
        assert stats["error_types"]["required"] == 3

    def test_reset_stats(self, validator, valid_form):
        validator.validate(valid_form)
        validator.reset_stats()
        stats = validator.get_stats()
        assert stats["total"] == 0
        assert stats["error_types"] == {}

    def test_unknown_reference_code(self, validator, valid_form):
        valid_form["references"] = "JA/TK-001,NOTAREF"
        is_valid, errors = validator.validate(valid_form)
        assert is_valid is False
        assert errors == ["'references': unknown reference: 'NOTAREF'"]
        assert validator.get_stats()["error_types"] == {"reference": 1}

    def test_unknown_his_reference_code(self, validator, valid_form):
        valid_form["his_qth"] = "TOKYO"
        is_valid, errors = validator.validate(valid_form)
        assert is_valid is False
        assert "his_qth" in errors[0]

    def test_file_required_when_files_given(self, validator, valid_form):
        is_valid, errors = validator.validate(valid_form, files={})
        assert is_valid is False
        assert errors == ["'filename' is a required file"]

    def test_file_present(self, validator, valid_form):
        is_valid, _ = validator.validate(valid_form, files={"filename": object()})
        assert is_valid is True
