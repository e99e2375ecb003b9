from xfb.app.outcome import DegradedReason, FatalReason, OutcomeKind, StageOutcome


def test_success_outcome_carries_value():
    outcome = StageOutcome.success(42)
    assert outcome.kind is OutcomeKind.SUCCESS
    assert outcome.is_success and not outcome.is_fatal and not outcome.is_degraded
    assert outcome.value == 42
    assert outcome.reason is None


def test_fatal_outcome_has_reason_and_no_value():
    outcome = StageOutcome.fatal(FatalReason.DEFAULT_COPY_FAILED, "copy failed")
    assert outcome.is_fatal
    assert outcome.value is None
    assert outcome.reason is FatalReason.DEFAULT_COPY_FAILED
    assert outcome.detail == "copy failed"


def test_degraded_outcome_keeps_fallback():
    outcome = StageOutcome.degraded(DegradedReason.STYLESHEET_MISSING, "palette-only")
    assert outcome.is_degraded
    assert outcome.value == "palette-only"
    assert outcome.reason is DegradedReason.STYLESHEET_MISSING


def test_message_translates_template_before_substituting():
    outcome = StageOutcome.fatal(
        FatalReason.DIRECTORY_CREATE_FAILED, "Could not create configuration directory:\n%1", "/home/ana/XFB"
    )
    catalog = {"Could not create configuration directory:\n%1": "Impossible de créer le dossier :\n%1"}
    assert outcome.message() == "Could not create configuration directory:\n/home/ana/XFB"
    assert outcome.message(lambda text: catalog.get(text, text)) == "Impossible de créer le dossier :\n/home/ana/XFB"
    assert outcome.args == ("/home/ana/XFB",)


def test_message_with_many_arguments_keeps_indices_apart():
    args = [f"v{i}" for i in range(1, 11)]
    outcome = StageOutcome.degraded(DegradedReason.PERMISSIONS_NOT_SET, None, "%1 %10", *args)
    assert outcome.message() == "v1 v10"
