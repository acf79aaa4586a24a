import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

import plugqc


def test_public_api_end_to_end(e2e_run):
    rec = plugqc.RecordingReporter()
    out = plugqc.quality_assessment({"run1": e2e_run}, reporter=rec)
    assert out[0]["A"]["orange"].tolist() == [1.0, 2.0]
    fig, axes = plugqc.plot_quality_assessment(rec.reports)
    assert len(axes) == 1
    plt.close(fig)


def test_errors_are_value_errors():
    assert issubclass(plugqc.EmptyRunError, plugqc.QualityAssessmentError)
    assert issubclass(plugqc.SchemaMismatchError, ValueError)
