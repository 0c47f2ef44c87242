"""
Sentence translation with Hugging Face MarianMT models.
Models are downloaded on first use, then cached locally by transformers.
"""

from typing import Dict, Optional, Tuple

from transformers import MarianMTModel, MarianTokenizer  # pre-trained translation models

from loguru import logger

from .. import settings
from .base import Translator


class MarianTranslator(Translator):
	"""
	Translates one sentence at a time with an opus-mt model per language pair.
	A pair whose model fails to load is remembered as unavailable and never retried.
	"""

	def __init__(self, model_template: str = settings.TRANSLATION_MODEL_TEMPLATE, max_new_tokens: int = 256):
		self.model_template = model_template  # e.g. Helsinki-NLP/opus-mt-{source}-{target}
		self.max_new_tokens = max_new_tokens  # generation cap per sentence
		self._models: Dict[Tuple[str, str], Optional[Tuple[MarianTokenizer, MarianMTModel]]] = {}

	def _get_model(self, source: str, target: str) -> Optional[Tuple[MarianTokenizer, MarianMTModel]]:
		key = (source, target)
		if key in self._models:
			return self._models[key]
		model_name = self.model_template.format(source=source, target=target)
		logger.info(f"[NLP] Loading translation model: {model_name}")
		try:
			tokenizer = MarianTokenizer.from_pretrained(model_name)
			model = MarianMTModel.from_pretrained(model_name)
			model.eval()  # inference only
			self._models[key] = (tokenizer, model)
		except Exception as e:
			logger.warning(f"[NLP] Translation model {model_name} unavailable: {e}")
			self._models[key] = None
		return self._models[key]

	def translate(self, sentence: str, source: str, target: str) -> Optional[str]:
		if not sentence:
			return None
		loaded = self._get_model(source, target)
		if loaded is None:
			return None
		tokenizer, model = loaded
		try:
			batch = tokenizer([sentence], return_tensors='pt', padding=True, truncation=True)
			generated = model.generate(**batch, max_new_tokens=self.max_new_tokens)
			translation = tokenizer.batch_decode(generated, skip_special_tokens=True)[0].strip()
		except Exception as e:
			logger.debug(f"[NLP] Translation failed for '{sentence[:40]}': {e}")
			return None
		return translation or None
