from docmeta.analysis.summary_generator import SummaryGenerator

SEVEN_SENTENCES = (
    "Alpha team met on the first day. "
    "Bravo team went to the old town. "
    "Charlie team walked along the river. "
    "This step was critical for the plan. "
    "Delta team rested at the camp. "
    "Echo team packed their bags. "
    "Foxtrot team drove back home."
)


class TestGenerate:
    def test_no_eligible_sentences(self) -> None:
        assert SummaryGenerator().generate("") == "No summary available."
        assert SummaryGenerator().generate("Hi. Short one. Ok.") == "No summary available."

    def test_single_sentence(self) -> None:
        text = "The quarterly review went according to plan."
        assert SummaryGenerator().generate(text) == "The quarterly review went according to plan."

    def test_picks_best_three_in_document_order(self) -> None:
        assert SummaryGenerator().generate(SEVEN_SENTENCES) == (
            "Alpha team met on the first day. "
            "Bravo team went to the old town. "
            "This step was critical for the plan."
        )

    def test_figures_raise_the_score(self) -> None:
        text = SEVEN_SENTENCES.replace(
            "Delta team rested at the camp.",
            "Delta team spent $400 at the camp.",
        )
        summary = SummaryGenerator().generate(text)
        assert "Delta team spent $400 at the camp" in summary
        assert "This step was critical for the plan" in summary

    def test_custom_cue_words(self) -> None:
        summary = SummaryGenerator(cue_words=("river",)).generate(SEVEN_SENTENCES)
        assert "Charlie team walked along the river" in summary
        assert "This step was critical for the plan" not in summary
