"""Roleplay prompt for the AI patient and parsing of its answer tags.

The patient answers in Indonesian and appends ``[KEY:value]`` markers when
an answer reveals anamnesis information. The game uses those markers to
tick off the player's OSCE anamnesis checklist.
"""

import re
from collections.abc import Mapping
from typing import Any

DEFAULT_PATIENT_NAME = "Pasien"
DEFAULT_PATIENT_AGE = 25
DEFAULT_PATIENT_GENDER = "Male"

QUESTION_PREFIX = "\nDokter bertanya: "

# Markers the patient must append; order matches the prompt
ANAMNESIS_TAGS = ("NAMA", "UMUR", "KELUHAN", "LOKASI", "DURASI", "RIWAYAT")

_TAG_PATTERN = re.compile(r"\[([A-Z]+):([^\[\]]*)\]")

_PROMPT_TEMPLATE = """
ROLEPLAY INSTRUCTION:
Kamu adalah pasien poli gigi bernama {name} ({gender}, {age} tahun).
Kamu sedang berbicara dengan Dokter Gigi (User).

KONDISI MEDIS KAMU:
"{condition}"

ATURAN PENTING:
1. Jawablah secara natural, pendek (max 2 kalimat), dan seperti orang awam yang sedang sakit.
2. JANGAN gunakan istilah medis canggih (kecuali kamu diceritakan sebagai dokter).
3. [WAJIB] Jika jawabanmu mengandung informasi tentang:
   - Nama -> Tambahkan tag [NAMA:{name}] di akhir.
   - Umur -> Tambahkan tag [UMUR:{age}] di akhir.
   - Keluhan Utama/Rasa Sakit -> Tambahkan tag [KELUHAN:...] di akhir.
   - Lokasi Gigi -> Tambahkan tag [LOKASI:...] di akhir.
   - Durasi Sakit -> Tambahkan tag [DURASI:...] di akhir.
   - Pemicu Sakit -> Tambahkan tag [RIWAYAT:...] di akhir.

CONTOH:
Dokter: "Namanya siapa?"
Kamu: "Saya {name} dok. [NAMA:{name}]"

Dokter: "Apa yang dirasa?"
Kamu: "Gigi bawah kanan saya nyut-nyutan banget kalau kena air es. [KELUHAN:Gigi ngilu][LOKASI:Rahang Bawah Kanan][RIWAYAT:Sakit kena dingin]"
"""


def build_roleplay_prompt(profile: Mapping[str, Any] | None, condition: str) -> str:
    """Render the system prompt for one patient.

    Args:
        profile: Generated patient (camelCase keys as sent by the client).
            Missing or empty fields fall back to a generic adult male patient.
        condition: The case's scenario narrative.

    Returns:
        The roleplay instruction text.
    """
    profile = profile or {}
    return _PROMPT_TEMPLATE.format(
        name=profile.get("name") or DEFAULT_PATIENT_NAME,
        gender=profile.get("gender") or DEFAULT_PATIENT_GENDER,
        age=profile.get("age") or DEFAULT_PATIENT_AGE,
        condition=condition,
    )


def build_patient_input(system_prompt: str, question: str) -> str:
    """Combine the roleplay prompt with the doctor's question."""
    return system_prompt + QUESTION_PREFIX + question


def extract_tags(answer: str) -> dict[str, str]:
    """Collect ``[KEY:value]`` markers from a patient answer.

    Only the anamnesis tags are kept, in order of first appearance; a
    repeated tag keeps its last value.
    """
    tags: dict[str, str] = {}
    for key, value in _TAG_PATTERN.findall(answer):
        if key in ANAMNESIS_TAGS:
            tags[key] = value.strip()
    return tags

