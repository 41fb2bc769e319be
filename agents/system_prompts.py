QUESTION_GENERATOR_PROMPT = """You are an exam-question writing agent.
- You will receive the text of a document and must write study questions with their answers.
- Answer strictly from the given text; do not invent facts.
- Your response must be ONLY a JSON array, no other text or explanation.
- Every element is an object with exactly two string fields: "question" and "answer".
- Expected JSON schema:
{schema}"""

QUESTION_TASK_TEMPLATE = (
    "Create questions from the following text in the {language} language:\n\n"
    "{text}\n\n"
    'Send the answer as JSON containing the questions and answers in this form: '
    '[{{"question": "...", "answer": "..."}}, ...]'
)
