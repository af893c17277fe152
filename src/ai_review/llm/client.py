import litellm

from ai_review.config import Settings

# Модели, которые умеют response_format=json_object
JSON_MODE_PREFIXES = ("gpt-4-1106-preview", "gpt-4o", "gpt-4.1")

QUERY_CONFIG = {
    "temperature": 0.4,
    "max_tokens": 700,
    "top_p": 1,
    "frequency_penalty": 0.2,
    "presence_penalty": 0.2,
}


def supports_json_mode(model: str) -> bool:
    name = model.split("/")[-1]
    return name.startswith(JSON_MODE_PREFIXES)


class LLMClient:
    def __init__(self, settings: Settings):
        self.model = settings.openai_api_model
        self.api_key = settings.openai_api_key

    def complete(self, prompt: str) -> str:
        """Отправить промпт одним system-сообщением и вернуть текст ответа."""
        extra = {}
        if supports_json_mode(self.model):
            extra["response_format"] = {"type": "json_object"}

        response = litellm.completion(
            model=self.model,
            api_key=self.api_key,
            messages=[{"role": "system", "content": prompt}],
            # неподдерживаемые провайдером параметры litellm отбросит сам
            drop_params=True,
            **QUERY_CONFIG,
            **extra,
        )

        text = response.choices[0].message.content
        return (text or "").strip() or "{}"
