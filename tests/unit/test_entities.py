from docintel.features.entities import (
    extract_amounts,
    extract_dates,
    extract_departments,
    extract_locations,
    extract_people,
    extract_regulations,
)


class TestDates:
    def test_all_formats_in_text_order(self) -> None:
        text = "Audit on 2024-03-01 and 15/08/2023, then March 5, 2024 and 7 April 2024."
        assert extract_dates(text) == ["2024-03-01", "15/08/2023", "March 5, 2024", "7 April 2024"]

    def test_abbreviated_month_names(self) -> None:
        text = "Deadline Jan 5, 2024 and 12 Sept 2024, review Dec. 1, 2024."
        assert extract_dates(text) == ["Jan 5, 2024", "12 Sept 2024", "Dec. 1, 2024"]

    def test_short_year_with_dashes(self) -> None:
        assert extract_dates("Due 5-6-24") == ["5-6-24"]

    def test_duplicates_are_removed(self) -> None:
        assert extract_dates("2024-03-01 and again 2024-03-01") == ["2024-03-01"]

    def test_no_dates(self) -> None:
        assert extract_dates("Platform 3 closed") == []


class TestAmounts:
    def test_currency_scale_and_grouped_amounts(self) -> None:
        text = "Budget of ₹5,00,000 approved plus 2 crore reserve and $1,200.50 spare"
        assert extract_amounts(text) == ["₹5,00,000", "2 crore", "$1,200.50"]

    def test_rupee_abbreviations(self) -> None:
        assert extract_amounts("Fine of Rs. 500 or INR 750") == ["Rs. 500", "INR 750"]

    def test_plain_numbers_are_not_amounts(self) -> None:
        assert extract_amounts("Platform 3, coach 12") == []


class TestDepartments:
    def test_matches_in_list_order(self) -> None:
        assert extract_departments("Engineering and Safety teams") == ["Engineering", "Safety"]

    def test_word_boundaries(self) -> None:
        assert extract_departments("Legalese and Financed") == []


class TestLocations:
    def test_singular_and_plural(self) -> None:
        text = "Meet at Aluva Station near Platforms 2 and the Depot"
        assert extract_locations(text) == ["Station", "Platform", "Depot"]


class TestPeople:
    def test_names_after_vocabulary_words(self) -> None:
        text = "Contact Ravi Kumar at Aluva Station. Signed, Anita Menon"
        assert extract_people(text) == ["Ravi Kumar", "Anita Menon"]

    def test_vocabulary_pairs_are_not_people(self) -> None:
        assert extract_people("Safety Department and Monday Notice") == []

    def test_duplicates_removed(self) -> None:
        assert extract_people("Ravi Kumar met Ravi Kumar") == ["Ravi Kumar"]


class TestRegulations:
    def test_words_then_numbered_references(self) -> None:
        text = "As per Rule 12 and Section 4.2 of the Safety Manual"
        assert extract_regulations(text) == ["Rule", "Manual", "Rule 12", "Section 4.2"]

    def test_no_regulations(self) -> None:
        assert extract_regulations("Train arrives late") == []
