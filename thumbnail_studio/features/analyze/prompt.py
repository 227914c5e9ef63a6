# thumbnail_studio/features/analyze/prompt.py
from typing import Optional

from .schemas import DetectedElements

DETECTION_PROMPT = """Analise esta thumbnail e identifique:
1. Há TEXTO visível na imagem? (Sim/Não)
2. Há NÚMEROS visíveis? (Sim/Não)
3. Há ÍCONES ou SÍMBOLOS? (Sim/Não)
4. Há EMOJIS? (Sim/Não)
5. Qual é o elemento visual principal?
6. Quais são as cores dominantes?
7. Qual é o estilo geral (profissional, casual, dramático, etc)?

Responda em formato JSON com as chaves: hasText, hasNumbers, hasIcons, hasEmojis, mainElement, dominantColors, style"""


def _yes_no(flag: bool) -> str:
    return "Sim" if flag else "Não"


def build_recommendation_prompt(detected: DetectedElements, question: Optional[str] = None) -> str:
    question_line = f'e considerando a pergunta do usuário: "{question.strip()}", ' if question and question.strip() else ""
    return f"""Com base na análise desta thumbnail, {question_line}forneça 5 recomendações práticas e específicas para otimização.

Contexto da imagem:
- Texto presente: {_yes_no(detected.has_text)}
- Números presentes: {_yes_no(detected.has_numbers)}
- Ícones presentes: {_yes_no(detected.has_icons)}
- Emojis presentes: {_yes_no(detected.has_emojis)}

IMPORTANTE:
- Se NÃO há texto, NÃO recomende mudanças em texto
- Se NÃO há números, NÃO recomende mudanças em números
- Foque em melhorias relevantes ao conteúdo REAL da imagem
- Seja específico sobre cores, composição, contraste
- Considere visualização em diferentes tamanhos (mobile/desktop)

Retorne APENAS um array JSON com 5 recomendações em português, formato: ["recomendação 1", "recomendação 2", ...]"""
