# contentforge/image_generator.py
import logging
from typing import Optional

import openai
from flask import current_app

from contentforge.prompts import build_image_prompt

logger = logging.getLogger('contentforge.external.image_generator')


def generate_image_url(title: str) -> Optional[str]:
    """
    Generates a header image with DALL-E for an article title.

    Args:
        title: Title of the article the image illustrates

    Returns:
        URL of the generated image or None if generation failed
    """
    try:
        api_key = current_app.config.get('OPENAI_API_KEY')
        if not api_key:
            logger.error("OpenAI API key not configured")
            return None

        client = openai.OpenAI(api_key=api_key, timeout=current_app.config.get('OPENAI_TIMEOUT', 120))
        prompt = build_image_prompt(title)
        logger.info(f"Generating image with prompt: {prompt}")

        response = client.images.generate(
            model=current_app.config.get('DALLE_MODEL', 'dall-e-3'),
            prompt=prompt,
            size=current_app.config.get('DALLE_SIZE', '1024x1024'),
            quality=current_app.config.get('DALLE_QUALITY', 'standard'),
            n=1
        )

        if not response or not response.data:
            logger.error("Invalid response from OpenAI Image API")
            return None

        image_url = response.data[0].url
        logger.info(f"Image generated: {image_url}")
        return image_url

    except Exception as e:
        # The article is saved without an image
        logger.warning(f"Failed to generate image: {e}", exc_info=True)
        return None
