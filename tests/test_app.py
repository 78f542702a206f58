from pathlib import Path

from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).resolve().parent.parent / "app.py"


def _run_app() -> AppTest:
    at = AppTest.from_file(str(APP_PATH), default_timeout=60)
    at.run()
    assert not at.exception
    return at


def test_app_renders_defaults():
    at = _run_app()
    assert at.slider(key="cm").value == 0.50
    assert at.slider(key="roas").value == 3.0
    assert at.selectbox(key="net_terms").value == 45

    assert [m.value for m in at.metric] == ["2.6x", "1.5x", "3.9x"]
    assert "Revenue Growth, 12 Months" in [s.value for s in at.subheader]
    assert "Indexed to starting revenue (1.0x)" in [c.value for c in at.caption]


def test_app_keeps_widget_values_across_reruns():
    at = _run_app()
    at.selectbox(key="net_terms").select(90).run()
    assert not at.exception
    assert at.selectbox(key="net_terms").value == 90
    assert at.slider(key="cm").value == 0.50
    assert at.metric[0].value == "3.6x"
    assert at.metric[2].value == "5.3x"
