"""Voice to language dialect lookup.

Every Kokoro voice belongs to exactly one dialect. The dialect decides which
rule table the engine runs and which branch post-processing takes.
"""

from __future__ import annotations

from enum import Enum

from kokoro_phonemizer.phonemizer.errors import LanguageNotFoundError


class LanguageDialect(str, Enum):
    """Supported language dialects."""

    NONE = ""
    EN_US = "en-us"
    EN_GB = "en-gb"
    JA_JP = "ja"
    ZH_CN = "zh"
    FR_FR = "fr-fr"
    HI_IN = "hi"
    IT_IT = "it"
    ES_ES = "es"
    PT_BR = "pt-br"


class Voice(str, Enum):
    """Kokoro voice tags."""

    # American English
    AF_ALLOY = "af_alloy"
    AF_AOEDE = "af_aoede"
    AF_BELLA = "af_bella"
    AF_HEART = "af_heart"
    AF_JESSICA = "af_jessica"
    AF_KORE = "af_kore"
    AF_NICOLE = "af_nicole"
    AF_NOVA = "af_nova"
    AF_RIVER = "af_river"
    AF_SARAH = "af_sarah"
    AF_SKY = "af_sky"
    AM_ADAM = "am_adam"
    AM_ECHO = "am_echo"
    AM_ERIC = "am_eric"
    AM_FENRIR = "am_fenrir"
    AM_LIAM = "am_liam"
    AM_MICHAEL = "am_michael"
    AM_ONYX = "am_onyx"
    AM_PUCK = "am_puck"
    AM_SANTA = "am_santa"
    # British English
    BF_ALICE = "bf_alice"
    BF_EMMA = "bf_emma"
    BF_ISABELLA = "bf_isabella"
    BF_LILY = "bf_lily"
    BM_DANIEL = "bm_daniel"
    BM_FABLE = "bm_fable"
    BM_GEORGE = "bm_george"
    BM_LEWIS = "bm_lewis"
    # Spanish
    EF_DORA = "ef_dora"
    EM_ALEX = "em_alex"
    # French
    FF_SIWIS = "ff_siwis"
    # Hindi
    HF_ALPHA = "hf_alpha"
    HF_BETA = "hf_beta"
    HF_OMEGA = "hf_omega"
    HM_PSI = "hm_psi"
    # Italian
    IF_SARA = "if_sara"
    IM_NICOLA = "im_nicola"
    # Japanese
    JF_ALPHA = "jf_alpha"
    JF_GONGITSUNE = "jf_gongitsune"
    JF_NEZUMI = "jf_nezumi"
    JF_TEBUKURO = "jf_tebukuro"
    JM_KUMO = "jm_kumo"
    # Brazilian Portuguese
    PF_DORA = "pf_dora"
    PM_SANTA = "pm_santa"
    # Mandarin Chinese
    ZF_XIAOBEI = "zf_xiaobei"
    ZF_XIAONI = "zf_xiaoni"
    ZF_XIAOXIAO = "zf_xiaoxiao"
    ZF_XIAOYI = "zf_xiaoyi"
    ZM_YUNJIAN = "zm_yunjian"
    ZM_YUNXI = "zm_yunxi"
    ZM_YUNXIA = "zm_yunxia"
    ZM_YUNYANG = "zm_yunyang"


VOICE_LANGUAGE: dict[Voice, LanguageDialect] = {
    Voice.AF_ALLOY: LanguageDialect.EN_US,
    Voice.AF_AOEDE: LanguageDialect.EN_US,
    Voice.AF_BELLA: LanguageDialect.EN_US,
    Voice.AF_HEART: LanguageDialect.EN_US,
    Voice.AF_JESSICA: LanguageDialect.EN_US,
    Voice.AF_KORE: LanguageDialect.EN_US,
    Voice.AF_NICOLE: LanguageDialect.EN_US,
    Voice.AF_NOVA: LanguageDialect.EN_US,
    Voice.AF_RIVER: LanguageDialect.EN_US,
    Voice.AF_SARAH: LanguageDialect.EN_US,
    Voice.AF_SKY: LanguageDialect.EN_US,
    Voice.AM_ADAM: LanguageDialect.EN_US,
    Voice.AM_ECHO: LanguageDialect.EN_US,
    Voice.AM_ERIC: LanguageDialect.EN_US,
    Voice.AM_FENRIR: LanguageDialect.EN_US,
    Voice.AM_LIAM: LanguageDialect.EN_US,
    Voice.AM_MICHAEL: LanguageDialect.EN_US,
    Voice.AM_ONYX: LanguageDialect.EN_US,
    Voice.AM_PUCK: LanguageDialect.EN_US,
    Voice.AM_SANTA: LanguageDialect.EN_US,
    Voice.BF_ALICE: LanguageDialect.EN_GB,
    Voice.BF_EMMA: LanguageDialect.EN_GB,
    Voice.BF_ISABELLA: LanguageDialect.EN_GB,
    Voice.BF_LILY: LanguageDialect.EN_GB,
    Voice.BM_DANIEL: LanguageDialect.EN_GB,
    Voice.BM_FABLE: LanguageDialect.EN_GB,
    Voice.BM_GEORGE: LanguageDialect.EN_GB,
    Voice.BM_LEWIS: LanguageDialect.EN_GB,
    Voice.EF_DORA: LanguageDialect.ES_ES,
    Voice.EM_ALEX: LanguageDialect.ES_ES,
    Voice.FF_SIWIS: LanguageDialect.FR_FR,
    Voice.HF_ALPHA: LanguageDialect.HI_IN,
    Voice.HF_BETA: LanguageDialect.HI_IN,
    Voice.HF_OMEGA: LanguageDialect.HI_IN,
    Voice.HM_PSI: LanguageDialect.HI_IN,
    Voice.IF_SARA: LanguageDialect.IT_IT,
    Voice.IM_NICOLA: LanguageDialect.IT_IT,
    Voice.JF_ALPHA: LanguageDialect.JA_JP,
    Voice.JF_GONGITSUNE: LanguageDialect.JA_JP,
    Voice.JF_NEZUMI: LanguageDialect.JA_JP,
    Voice.JF_TEBUKURO: LanguageDialect.JA_JP,
    Voice.JM_KUMO: LanguageDialect.JA_JP,
    Voice.PF_DORA: LanguageDialect.PT_BR,
    Voice.PM_SANTA: LanguageDialect.PT_BR,
    Voice.ZF_XIAOBEI: LanguageDialect.ZH_CN,
    Voice.ZF_XIAONI: LanguageDialect.ZH_CN,
    Voice.ZF_XIAOXIAO: LanguageDialect.ZH_CN,
    Voice.ZF_XIAOYI: LanguageDialect.ZH_CN,
    Voice.ZM_YUNJIAN: LanguageDialect.ZH_CN,
    Voice.ZM_YUNXI: LanguageDialect.ZH_CN,
    Voice.ZM_YUNXIA: LanguageDialect.ZH_CN,
    Voice.ZM_YUNYANG: LanguageDialect.ZH_CN,
}


def language_for_voice(voice: Voice | str) -> LanguageDialect:
    """Look up the dialect a voice speaks.

    Args:
        voice: Voice member or its raw tag (e.g. "bm_fable")

    Returns:
        The voice's LanguageDialect

    Raises:
        LanguageNotFoundError: If the voice has no table entry
    """
    try:
        return VOICE_LANGUAGE[Voice(voice)]
    except (ValueError, KeyError):
        raise LanguageNotFoundError(voice) from None
