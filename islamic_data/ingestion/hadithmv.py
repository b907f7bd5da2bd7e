"""Catalog of the HadithMV JSON books (Arabic with Dhivehi translations)."""

from __future__ import annotations

from islamic_data.ingestion.models import CollectionDescriptor, DatasetSource, Edition

HADITHMV_BASE_URL = "https://raw.githubusercontent.com/hadithmv/hadithmv.github.io/master/js/json/"

# HadithMV ships one file per book that already bundles Arabic and Dhivehi.
DHIVEHI = Edition(code="div", label="dhivehi")

HADITHMV_BOOKS: tuple[CollectionDescriptor, ...] = (
    CollectionDescriptor("Muwatta Malik", "muwattaMalik", (DHIVEHI,), native_name="موطأ مالك"),
    CollectionDescriptor("Nawawi's 40 Hadith", "arbaoonNawawi", (DHIVEHI,), native_name="الأربعون النووية"),
    CollectionDescriptor("Bulughul Maram", "bulughulMaram", (DHIVEHI,), native_name="بلوغ المرام"),
    CollectionDescriptor("Umdatul Ahkam", "umdathulAhkam", (DHIVEHI,), native_name="عمدة الأحكام"),
    CollectionDescriptor("Hisn al-Muslim", "hisnulMuslim", (DHIVEHI,), native_name="حصن المسلم"),
    CollectionDescriptor(
        "Abu Khaithama's Book of Knowledge",
        "kitabulIlmAbiKhaithama",
        (DHIVEHI,),
        native_name="كتاب العلم",
    ),
)

HADITHMV_SOURCE = DatasetSource(
    name="hadithmv",
    url_template=HADITHMV_BASE_URL + "{slug}.json",
    filename_template="{slug}.json",
    collections=HADITHMV_BOOKS,
    subdir="hadithmv",
    title="HadithMV - The Maldivian Platform for Translations of the Sunnah",
    description="Hadith collections with Dhivehi translations",
    homepage="https://hadithmv.github.io",
    repository="https://github.com/hadithmv/hadithmv.github.io",
    write_manifest=True,
)

__all__ = ["DHIVEHI", "HADITHMV_BASE_URL", "HADITHMV_BOOKS", "HADITHMV_SOURCE"]
