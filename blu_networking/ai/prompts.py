"""Networking coach prompts."""

SYSTEM_PROMPT = (
    "You are an expert networking coach for business professionals who provides "
    "actionable, tailored networking advice."
)

NOT_SPECIFIED = "Not specified"

TIPS_PROMPT_TEMPLATE = """As a professional networking coach, provide personalized networking tips for a business professional with the following profile:

- Name: {full_name}
- Industry: {industry}
- Expertise/Skills: {expertise}
- Company: {company}
- Job Title: {title}
{goal_line}
{event_type_line}

Create a set of actionable networking tips tailored to this specific professional based on their industry, expertise, and goals. Include:
1. At least 3 personalized conversation starters that would work well for their background
2. Industry-specific networking advice
3. Follow-up strategies appropriate for their role
4. A brief summary of the key networking focus areas for this professional

Respond with JSON in this format:
{{
  "tips": [
    {{
      "category": "conversation_starter",
      "tip": "The conversation starter text",
      "reasoning": "Brief explanation of why this works for their background"
    }}
  ],
  "summary": "A concise 1-2 sentence summary of key networking focus areas"
}}

Use one of these categories for each tip: conversation_starter, industry_specific, follow_up."""
