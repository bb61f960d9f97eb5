QUESTION_GENERATION_SYSTEM_PROMPT = "You are an expert AI technical interviewer. Always reply with valid JSON."

QUESTION_GENERATION_PROMPT = """
Based on the following job description and candidate CV, generate exactly {n} relevant interview questions
that will help assess the candidate's fit for the role.

The questions should cover:
- Technical and coding skills (at least {min_coding} coding-specific questions)
- Relevant experience
- Problem-solving abilities
- System design (if applicable)
- Soft skills and team collaboration

Ensure the coding questions are specific and challenging based on the technologies mentioned in the job description and CV.

Job Description:
{job_description}

Candidate CV:
{cv_content}

Return the questions as a JSON array of objects, where each object has the following structure:
{{
    "question": "The interview question text",
    "type": "coding" | "technical" | "experience" | "soft_skills"
}}

Classify each question as "coding" (requires writing code), "technical" (knowledge-based),
"experience" (about past work), or "soft_skills" (behavioral or team-related).
"""

EVALUATION_SYSTEM_PROMPT = "You are an expert AI technical interviewer and evaluator. Respond with ONLY a valid JSON object."

EVALUATION_PROMPT = """
Analyze the following interview transcript and provide a comprehensive evaluation of the candidate's performance.
Check each answer strictly.

Job Description:
{job_description}

Candidate CV:
{cv_content}

Interview Transcript:
{transcript}

Response Times (in milliseconds):
{response_times}

Number of coding questions: {coding_questions}

Provide an evaluation with the following structure:
1. Overall score (0-100)
2. Scores for categories: Technical Acumen, Coding Proficiency, Communication Skills, Responsiveness & Agility, Problem-Solving & Adaptability, Cultural Fit & Soft Skills
3. A summary of the candidate's performance
4. Key strengths (list)
5. Areas for improvement (list)

Return your evaluation as a JSON object with the following structure:
{{
    "overallScore": number,
    "categories": {{
        "technicalAcumen": number,
        "codingProficiency": number,
        "communicationSkills": number,
        "responsivenessAgility": number,
        "problemSolvingAdaptability": number,
        "culturalFitSoftSkills": number
    }},
    "responseTimes": {{
        "average": number,
        "fastest": number,
        "slowest": number
    }},
    "summary": string,
    "strengths": string[],
    "improvements": string[]
}}
"""
