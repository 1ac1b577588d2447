"""Every prompt template used by tailwind-mcp. No magic strings anywhere else.

All prompts use .format() with named placeholders.
"""

REVIEW_COMPONENT = """You are a senior {framework_title} and Tailwind CSS engineer.
Review the component below and suggest concrete improvements.

Focus on:
- {framework_title} idioms ({idiom})
- Responsive variants (sm:, md:, lg:) that fit the existing utility classes
- Accessibility (ARIA, keyboard focus, contrast)
- Dark mode (dark:) variants where appropriate

Rules:
- Do NOT rewrite the whole component
- Keep every existing utility class
- Reply with a short bulleted list, at most 8 bullets, no preamble

Component ({framework}):
```
{code}
```
"""

FRAMEWORK_IDIOMS = {
    "react": "function components, hooks, props spreading",
    "vue": "single-file components, <script setup>, composition API",
    "svelte": "reactive declarations, slots, $$restProps",
    "angular": "standalone components, inputs, content projection",
}
