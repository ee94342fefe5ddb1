"""
Unit tests for the Review Loader.
Each test writes a small CSV to a temporary directory.
"""

import os
import tempfile
from pathlib import Path

import pytest
from src.ingestion.review_loader import ReviewLoader, ReviewLoadError, load_reviews
import config.settings as settings


@pytest.fixture
def csv_dir():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


def write_csv(directory, content, name="reviews.csv"):
    path = os.path.join(directory, name)
    with open(path, "w") as f:
        f.write(content)
    return path


def test_load_basic(csv_dir):
    path = write_csv(csv_dir, (
        "reviewId,title,category,productId,price\n"
        "1,Great headphones,Tech,P001,59.99\n"
        "2,Decent blender,Home,P002,75\n"
    ))

    reviews = ReviewLoader(path).load()

    assert len(reviews) == 2
    assert reviews[0].review_id == 1
    assert reviews[0].title == "Great headphones"
    assert reviews[0].category == "Tech"
    assert reviews[0].product_id == "P001"
    assert reviews[0].price == 59.99
    assert reviews[1].price == 75.0


def test_columns_bound_by_header_name(csv_dir):
    path = write_csv(csv_dir, (
        "price,productId,reviewId,category,title\n"
        "12.5,P009,3,Home,Kettle\n"
    ))

    review = load_reviews(path)[0]

    assert review.review_id == 3
    assert review.title == "Kettle"
    assert review.product_id == "P009"
    assert review.price == 12.5


def test_leading_whitespace_is_trimmed(csv_dir):
    path = write_csv(csv_dir, (
        "reviewId, title, category, productId, price\n"
        "1,  Great headphones, Tech,   P001, 59.99\n"
    ))

    review = load_reviews(path)[0]

    assert review.title == "Great headphones"
    assert review.category == "Tech"
    assert review.product_id == "P001"


def test_empty_cells(csv_dir):
    """Empty text becomes None; empty numbers default to 0."""
    path = write_csv(csv_dir, (
        "reviewId,title,category,productId,price\n"
        "1,,,,\n"
    ))

    review = load_reviews(path)[0]

    assert review.title is None
    assert review.category is None
    assert review.product_id is None
    assert review.price == 0.0


def test_na_text_is_kept_literally(csv_dir):
    path = write_csv(csv_dir, (
        "reviewId,title,category,productId,price\n"
        "1,NA,null,N/A,5\n"
    ))

    review = load_reviews(path)[0]

    assert review.title == "NA"
    assert review.category == "null"
    assert review.product_id == "N/A"


def test_quoted_title_with_delimiter(csv_dir):
    path = write_csv(csv_dir, (
        "reviewId,title,category,productId,price\n"
        '1, "Great, really great",Tech,P001,10\n'
    ))

    assert load_reviews(path)[0].title == "Great, really great"


def test_extra_columns_are_ignored(csv_dir):
    path = write_csv(csv_dir, (
        "reviewId,title,category,productId,price,rating\n"
        "1,Fine,Home,P001,10,4\n"
    ))

    assert load_reviews(path)[0].title == "Fine"


def test_file_order_is_preserved(csv_dir):
    rows = "".join(f"{i},Title {i},Tech,P{i:03d},{100 - i}\n" for i in range(1, 6))
    path = write_csv(csv_dir, "reviewId,title,category,productId,price\n" + rows)

    reviews = load_reviews(path)

    assert [r.review_id for r in reviews] == [1, 2, 3, 4, 5]


def test_header_only_file_loads_nothing(csv_dir):
    path = write_csv(csv_dir, "reviewId,title,category,productId,price\n")

    assert load_reviews(path) == []


def test_missing_column_raises(csv_dir):
    path = write_csv(csv_dir, (
        "reviewId,title,category,price\n"
        "1,Fine,Home,10\n"
    ))

    with pytest.raises(ReviewLoadError, match="productId"):
        load_reviews(path)


def test_non_numeric_price_raises(csv_dir):
    path = write_csv(csv_dir, (
        "reviewId,title,category,productId,price\n"
        "1,Fine,Home,P001,10\n"
        "2,Broken,Home,P002,cheap\n"
    ))

    with pytest.raises(ReviewLoadError, match="row 2"):
        load_reviews(path)


def test_nan_price_raises(csv_dir):
    path = write_csv(csv_dir, (
        "reviewId,title,category,productId,price\n"
        "1,Fine,Home,P001,nan\n"
    ))

    with pytest.raises(ReviewLoadError):
        load_reviews(path)


def test_negative_price_raises(csv_dir):
    path = write_csv(csv_dir, (
        "reviewId,title,category,productId,price\n"
        "1,Fine,Home,P001,-5\n"
    ))

    with pytest.raises(ReviewLoadError, match="row 1"):
        load_reviews(path)


def test_non_integer_review_id_raises(csv_dir):
    path = write_csv(csv_dir, (
        "reviewId,title,category,productId,price\n"
        "abc,Fine,Home,P001,5\n"
    ))

    with pytest.raises(ReviewLoadError, match="reviewId"):
        load_reviews(path)


def test_row_with_extra_field_raises(csv_dir):
    """A trailing delimiter must not shift fields into the wrong columns."""
    path = write_csv(csv_dir, (
        "reviewId,title,category,productId,price\n"
        "10,20,Home,P1,5,\n"
    ))

    with pytest.raises(ReviewLoadError, match="row 1: expected 5 fields, found 6"):
        load_reviews(path)


def test_row_with_missing_fields_raises(csv_dir):
    path = write_csv(csv_dir, (
        "reviewId,title,category,productId,price\n"
        "1,Fine,Home,P001,10\n"
        "2,Short\n"
    ))

    with pytest.raises(ReviewLoadError, match="row 2: expected 5 fields, found 2"):
        load_reviews(path)


def test_blank_lines_are_skipped(csv_dir):
    path = write_csv(csv_dir, (
        "reviewId,title,category,productId,price\n"
        "1,Fine,Home,P001,10\n"
        "\n"
        "2,Also fine,Home,P002,20\n"
    ))

    assert [r.review_id for r in load_reviews(path)] == [1, 2]


def test_missing_file_raises(csv_dir):
    with pytest.raises(ReviewLoadError, match="not found"):
        load_reviews(os.path.join(csv_dir, "nope.csv"))


def test_empty_file_raises(csv_dir):
    path = write_csv(csv_dir, "")

    with pytest.raises(ReviewLoadError, match="empty"):
        load_reviews(path)


def test_bundled_sample_data_loads():
    reviews = load_reviews(settings.DEFAULT_REVIEWS_CSV)

    assert len(reviews) == 10
    assert reviews[4].title is None


def test_sample_data_ships_inside_package():
    import src.data

    package_dirs = [Path(p).resolve() for p in src.data.__path__]
    assert settings.DEFAULT_REVIEWS_CSV.parent.resolve() in package_dirs
    assert settings.DEFAULT_REVIEWS_CSV.suffix == ".csv"
